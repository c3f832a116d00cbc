"""JSON round-trip helpers for arbitrary objects."""

import dataclasses
import json
from typing import Any

from pydantic import BaseModel, ValidationError

from csscraft.exceptions import DeserializationError, SerializationError


def _to_plain(obj: Any) -> Any:
    """Convert an object json cannot encode natively into plain data.

    Args:
        obj: Object rejected by the default JSON encoder

    Returns:
        A dict or list the encoder can handle.

    Raises:
        SerializationError: If the object has no data to serialize.

    """
    if isinstance(obj, BaseModel):
        return obj.model_dump(mode='json')
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.asdict(obj)
    if isinstance(obj, (set, frozenset)):
        return list(obj)
    if hasattr(obj, '__dict__') and not isinstance(obj, type):
        return vars(obj)
    raise SerializationError(f'Object of type {type(obj).__name__} is not JSON serializable')


def get_json(obj: Any) -> str:
    """Return the compact JSON representation of an object.

    Keys keep the object's own order; no whitespace is emitted between tokens.

    Example:
        >>> get_json([1, 2, 3])
        '[1,2,3]'
        >>> get_json({'width': 10, 'height': 20})
        '{"width":10,"height":20}'

    Raises:
        SerializationError: If the object (or anything inside it) has no JSON form.

    """
    try:
        return json.dumps(obj, separators=(',', ':'), ensure_ascii=False, default=_to_plain)
    except ValueError as e:
        raise SerializationError(f'Cannot serialize {type(obj).__name__}: {e}') from e


def from_json(target: Any, text: str | bytes) -> Any:
    """Load JSON text as an object of the given type.

    Pydantic models are validated normally. Any other class gets an instance
    created without running ``__init__`` whose attributes are the parsed
    members, so the class's methods work on the result.

    Args:
        target: Class to load into, or an instance of it
        text: JSON text

    Returns:
        Instance of ``target``'s class.

    Raises:
        DeserializationError: If the text is not valid JSON or does not fit the class.

    """
    cls = target if isinstance(target, type) else type(target)

    if issubclass(cls, BaseModel):
        try:
            return cls.model_validate_json(text)
        except ValidationError as e:
            raise DeserializationError(cls, str(e)) from e

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise DeserializationError(cls, e.msg) from e

    if isinstance(data, cls):
        return data
    if not isinstance(data, dict):
        raise DeserializationError(cls, f'expected a JSON object, got {type(data).__name__}')

    obj = cls.__new__(cls)
    if not hasattr(obj, '__dict__'):
        raise DeserializationError(cls, 'instances have no attribute dictionary')
    obj.__dict__.update(data)
    return obj
