"""Shared helpers: data errors, vectors and game asset paths."""

from __future__ import annotations

from dataclasses import astuple, dataclass
from typing import Iterator, Sequence

PATH_DATA = "/Game/Data/"
PATH_MESH = "/Game/Mesh/"
PATH_FX = "/Game/FX/"
PATH_TEXTURE = "/Game/Texture/"
PATH_THUMBNAIL = "/Game/Texture/WidgetImage/Thumbnail/"
PATH_SOUND = "/Game/Sound/Cue/"
PATH_BLUEPRINT = "/Game/Blueprint/"


class GameDataError(ValueError):
    """Raised when game data is missing, malformed or out of range."""


@dataclass(frozen=True)
class Vector:
    """A point or direction in 3D space."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        return iter(astuple(self))

    def __getitem__(self, index: int) -> float:
        return astuple(self)[index]


def json_to_vector(values: Sequence[object]) -> Vector:
    """Build a Vector from a JSON array of exactly three numbers."""
    if not isinstance(values, (list, tuple)) or len(values) != 3:
        raise GameDataError("a vector needs exactly three components")
    for value in values:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise GameDataError(f"vector component {value!r} is not a number")
    x, y, z = (float(value) for value in values)
    return Vector(x, y, z)


def asset_path(base: str, name: str) -> str:
    """Join an asset directory and an asset name into a game asset path."""
    return f"{base}{name}"