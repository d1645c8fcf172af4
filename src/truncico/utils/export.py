"""
JSON-ready records for the presentation layer.
"""

from __future__ import annotations

import json
from dataclasses import asdict
from pathlib import Path
from typing import Any, Dict, List, Sequence, Tuple

from ..config import BuildConfig
from ..geometry.metrics import solid_metrics
from ..geometry.projection import ProjectedFace, normal_to_euler, project_faces
from ..geometry.truncation import Face, FaceKind

# Hexagons are laid down first so pentagons sit on top.
LAYER_ORDER = {FaceKind.HEXAGON: 0, FaceKind.PENTAGON: 1}


def layered(faces: Sequence[Face]) -> List[Face]:
    """Faces in drawing order; order within a kind is kept."""
    return sorted(faces, key=lambda f: LAYER_ORDER[f.kind])


def face_record(face: Face, flat: ProjectedFace, scale: float) -> Dict[str, Any]:
    pitch, yaw = normal_to_euler(face.normal)
    return {
        "kind": face.kind.value,
        "source": face.source,
        "verts": face.verts.tolist(),
        "normal": face.normal.tolist(),
        "plane_offset": face.plane_offset,
        "points01": flat.points01.tolist(),
        "width": flat.width,
        "height": flat.height,
        "size": [flat.width * scale, flat.height * scale],
        "translate_z": face.plane_offset * scale,
        "pitch": pitch,
        "yaw": yaw,
    }


def faces_to_document(faces: Sequence[Face], config: BuildConfig) -> Dict[str, Any]:
    """Parameters, solid metrics and one record per face, hexagons first."""
    ordered = layered(faces)
    flats: Tuple[ProjectedFace, ...] = project_faces(ordered, config.min_extent)
    return {
        "parameters": asdict(config),
        "metrics": asdict(solid_metrics(faces)),
        "faces": [face_record(f, p, config.scale) for f, p in zip(ordered, flats)],
    }


def write_document(doc: Dict[str, Any], out: str) -> None:
    """Write JSON to `out`, or to stdout when out is '-'."""
    text = json.dumps(doc, indent=2)
    if out == "-":
        print(text)
        return
    path = Path(out)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text + "\n", encoding="utf-8")
