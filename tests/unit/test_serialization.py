import json
from dataclasses import dataclass

import pytest

from csscraft.exceptions import DeserializationError, SerializationError
from csscraft.models import Rectangle
from csscraft.serialization import from_json, get_json


class Circle:
    def __init__(self, radius):
        self.radius = radius

    def get_diameter(self):
        return self.radius * 2


@dataclass
class Point:
    x: int
    y: int


def test_get_json_plain_values():
    assert get_json([1, 2, 3]) == '[1,2,3]'
    assert get_json({'width': 10, 'height': 20}) == '{"width":10,"height":20}'
    assert get_json('text') == '"text"'
    assert get_json(None) == 'null'


def test_get_json_keeps_key_order():
    assert get_json({'b': 1, 'a': 2}) == '{"b":1,"a":2}'


def test_get_json_pydantic_model():
    assert get_json(Rectangle(10, 20)) == '{"width":10,"height":20}'


def test_get_json_dataclass_and_plain_object():
    assert get_json(Point(1, 2)) == '{"x":1,"y":2}'
    assert get_json(Circle(10)) == '{"radius":10}'


def test_get_json_nested_objects():
    assert get_json({'shapes': [Circle(1), Point(0, 0)]}) == '{"shapes":[{"radius":1},{"x":0,"y":0}]}'


def test_get_json_non_ascii():
    assert get_json({'name': 'café'}) == '{"name":"café"}'


def test_get_json_unserializable():
    with pytest.raises(SerializationError):
        get_json(object())


def test_from_json_plain_class():
    circle = from_json(Circle, '{"radius":10}')
    assert isinstance(circle, Circle)
    assert circle.radius == 10
    assert circle.get_diameter() == 20


def test_from_json_accepts_an_instance_as_target():
    circle = from_json(Circle(1), '{"radius":3}')
    assert isinstance(circle, Circle)
    assert circle.get_diameter() == 6


def test_from_json_pydantic_model():
    rect = from_json(Rectangle, '{"width":10,"height":20}')
    assert isinstance(rect, Rectangle)
    assert rect.get_area() == 200


def test_from_json_builtin_container():
    assert from_json(list, '[1,2,3]') == [1, 2, 3]
    assert from_json(dict, '{"a":1}') == {'a': 1}


def test_round_trip_plain_object():
    circle = from_json(Circle, get_json(Circle(4)))
    assert circle.get_diameter() == 8


def test_from_json_malformed_text():
    with pytest.raises(DeserializationError) as exc_info:
        from_json(Circle, '{"radius":')
    assert isinstance(exc_info.value, ValueError)
    assert isinstance(exc_info.value.__cause__, json.JSONDecodeError)
    assert exc_info.value.target is Circle


def test_from_json_malformed_text_for_model():
    with pytest.raises(DeserializationError):
        from_json(Rectangle, 'not json')


def test_from_json_model_missing_field():
    with pytest.raises(DeserializationError):
        from_json(Rectangle, '{"width":10}')


def test_from_json_non_object_for_plain_class():
    with pytest.raises(DeserializationError):
        from_json(Circle, '[1,2]')


def test_get_json_cyclic_object():
    class Node:
        def __init__(self):
            self.me = self

    with pytest.raises(SerializationError) as exc_info:
        get_json(Node())
    assert isinstance(exc_info.value.__cause__, ValueError)
