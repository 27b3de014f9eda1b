"""
Minefield module.

Provides the core puzzle model: cells, the field with mine placement and
cascade reveal, the detector's restricted view, and the console renderer.
"""
from .errors import (
    MinefieldError,
    InvalidConfiguration,
    ContractViolation,
    ExhaustedFallback,
)
from .cell import Cell, Visibility, EMPTY, MINE, MAX_COUNT
from .field import Field, FieldConfig, GameOutcome, DEFAULT_CONFIG
from .view import FieldView
from .render import glyph, color, render_field
from .environment import MinefieldEnv

__all__ = [
    "MinefieldError",
    "InvalidConfiguration",
    "ContractViolation",
    "ExhaustedFallback",
    "Cell",
    "Visibility",
    "EMPTY",
    "MINE",
    "MAX_COUNT",
    "Field",
    "FieldConfig",
    "GameOutcome",
    "DEFAULT_CONFIG",
    "FieldView",
    "glyph",
    "color",
    "render_field",
    "MinefieldEnv",
]
