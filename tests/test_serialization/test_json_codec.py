"""Tests for get_json / from_json."""

import dataclasses

import pytest

from objtasks.config import ObjtasksConfig
from objtasks.errors import ObjtasksError, SerializationError
from objtasks.model import Rectangle
from objtasks.serialization import from_json, get_json


class Circle:
    def __init__(self, radius):
        self.radius = radius
        self.calls = 0

    def get_diameter(self):
        return self.radius * 2


class Slotted:
    __slots__ = ("x",)


@dataclasses.dataclass(frozen=True)
class FrozenPoint:
    x: int
    y: int


# ---------------------------------------------------------------------------
# get_json
# ---------------------------------------------------------------------------


class TestGetJson:
    def test_list(self):
        assert get_json([1, 2, 3]) == "[1,2,3]"

    def test_dict(self):
        assert get_json({"width": 10, "height": 20}) == '{"width":10,"height":20}'

    def test_scalars(self):
        assert get_json("text") == '"text"'
        assert get_json(None) == "null"
        assert get_json(True) == "true"

    def test_non_ascii_kept(self):
        assert get_json({"name": "café"}) == '{"name":"café"}'

    def test_dataclass(self):
        assert get_json(Rectangle(10, 20)) == '{"width":10,"height":20}'

    def test_plain_object_skips_private_attributes(self):
        c = Circle(3)
        c._cache = "hidden"
        assert get_json(c) == '{"radius":3,"calls":0}'

    def test_nested_objects(self):
        assert get_json({"shapes": [Rectangle(1, 2)]}) == '{"shapes":[{"width":1,"height":2}]}'

    def test_sort_keys(self):
        config = ObjtasksConfig(json_sort_keys=True)
        assert get_json(Rectangle(10, 20), config) == '{"height":20,"width":10}'

    def test_indent(self):
        config = ObjtasksConfig(json_indent=2)
        assert get_json([1, 2], config) == "[\n  1,\n  2\n]"

    def test_unserializable_raises(self):
        with pytest.raises(SerializationError) as exc_info:
            get_json({"value": {1, 2}})
        assert isinstance(exc_info.value.cause, TypeError)


# ---------------------------------------------------------------------------
# from_json
# ---------------------------------------------------------------------------


class TestFromJson:
    def test_rectangle(self):
        r = from_json(Rectangle, '{"width":10,"height":20}')
        assert isinstance(r, Rectangle)
        assert r.width == 10
        assert r.height == 20
        assert r.get_area() == 200

    def test_frozen_dataclass(self):
        p = from_json(FrozenPoint, '{"x":1,"y":2}')
        assert isinstance(p, FrozenPoint)
        assert p == FrozenPoint(1, 2)
        with pytest.raises(dataclasses.FrozenInstanceError):
            p.x = 5  # type: ignore[misc]

    def test_init_not_called(self):
        c = from_json(Circle, '{"radius":10}')
        assert c.radius == 10
        assert not hasattr(c, "calls")
        assert c.get_diameter() == 20

    def test_extra_keys_become_attributes(self):
        r = from_json(Rectangle, '{"width":1,"height":2,"color":"red"}')
        assert r.color == "red"

    def test_round_trip(self):
        original = Rectangle(3, 4)
        assert from_json(Rectangle, get_json(original)) == original

    def test_invalid_json(self):
        with pytest.raises(SerializationError, match="Invalid JSON"):
            from_json(Rectangle, "{width: 10")

    def test_non_object_json(self):
        with pytest.raises(SerializationError, match="Expected a JSON object"):
            from_json(Rectangle, "[1, 2, 3]")

    def test_slotted_class_rejects_unknown_key(self):
        with pytest.raises(SerializationError, match="'y'"):
            from_json(Slotted, '{"y": 1}')

    def test_slotted_class_accepts_known_key(self):
        s = from_json(Slotted, '{"x": 1}')
        assert s.x == 1

    def test_error_is_objtasks_error(self):
        with pytest.raises(ObjtasksError):
            from_json(Rectangle, "not json")
