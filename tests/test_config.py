import math

import pytest

from truncico.config import DEFAULT_TRUNCATION, BuildConfig, check_truncation
from truncico.errors import ConfigurationError, DegenerateGeometryError


def test_defaults_validate():
    cfg = BuildConfig().validate()
    assert cfg.truncation == DEFAULT_TRUNCATION
    assert cfg.scale == 100.0


@pytest.mark.parametrize("s", [0.0, 1.0, -1.0, 2.0, math.nan])
def test_check_truncation_rejects(s):
    with pytest.raises(DegenerateGeometryError):
        check_truncation(s)


def test_check_truncation_coerces():
    assert check_truncation("0.25") == 0.25


@pytest.mark.parametrize(
    "field, value",
    [
        ("scale", 0.0),
        ("scale", -3.0),
        ("planarity_tolerance", -1e-6),
        ("min_extent", math.nan),
    ],
)
def test_invalid_settings(field, value):
    cfg = BuildConfig(**{field: value})
    with pytest.raises(ConfigurationError):
        cfg.validate()
