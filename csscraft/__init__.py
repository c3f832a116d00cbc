"""csscraft - CSS selector builder.

Compose selectors from structured parts, plus small JSON and shape helpers.
"""

from csscraft.builder import Combinator, CompoundSelector, SelectorPart, combine, css_selector_builder
from csscraft.exceptions import (
    CsscraftError,
    DeserializationError,
    OccurrenceError,
    OrderError,
    SelectorBuildError,
    SerializationError,
)
from csscraft.models import Rectangle, SelectorChain, SelectorLink, SelectorSpec
from csscraft.serialization import from_json, get_json

__all__ = [
    # Selector builder
    'Combinator',
    'CompoundSelector',
    'SelectorPart',
    'combine',
    'css_selector_builder',
    # Selector descriptions
    'SelectorChain',
    'SelectorLink',
    'SelectorSpec',
    # Shapes and JSON
    'Rectangle',
    'from_json',
    'get_json',
    # Errors
    'CsscraftError',
    'DeserializationError',
    'OccurrenceError',
    'OrderError',
    'SelectorBuildError',
    'SerializationError',
]
