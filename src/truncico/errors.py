"""
Exception and warning types raised by the truncation pipeline.
"""

from __future__ import annotations


class TruncicoError(Exception):
    """Base class for all pipeline failures."""


class ConfigurationError(TruncicoError):
    """Malformed base topology or invalid build settings. Never recovered internally."""


class DegenerateGeometryError(TruncicoError):
    """Truncation fraction outside (0, 1) or a face that collapses when projected."""


class NumericToleranceWarning(UserWarning):
    """A planarity or orientation check missed its tolerance; the build continues."""
