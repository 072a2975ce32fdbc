"""Laser-cut options: dataclasses, parsing, validation, and serialization."""

from .models import (
    Size, Material, SIZES, MATERIALS, TileGridSize, LaserCutOptions,
    LaserCutOptionsError,
)
from .parsing import parse_options
from .validation import validate_options
from .serialization import options_to_dict

__all__ = [
    # Models
    "Size", "Material", "SIZES", "MATERIALS",
    "TileGridSize", "LaserCutOptions", "LaserCutOptionsError",
    # Parsing / Validation / Serialization
    "parse_options", "validate_options", "options_to_dict",
]
