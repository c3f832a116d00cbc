"""Pydantic models for shapes and selector descriptions."""

from csscraft.models.descriptions import SelectorChain, SelectorLink, SelectorSpec
from csscraft.models.shapes import Rectangle

__all__ = [
    'Rectangle',
    'SelectorChain',
    'SelectorLink',
    'SelectorSpec',
]
