"""Tests for the Rectangle value and JSON helpers."""

import pytest

from selectorkit.objects import Rectangle, from_json, get_json


class Circle:
    def __init__(self, radius):
        raise AssertionError("from_json must not call __init__")

    def get_circumference(self):
        return 2 * 3.14 * self.radius


class Point:
    __slots__ = ("x", "y")

    def norm(self):
        return abs(self.x) + abs(self.y)


class TestRectangle:
    def test_fields(self):
        r = Rectangle(10, 20)
        assert r.width == 10
        assert r.height == 20

    def test_area(self):
        assert Rectangle(10, 20).get_area() == 200
        assert Rectangle(5, 0).get_area() == 0


class TestGetJson:
    def test_list(self):
        assert get_json([1, 2, 3]) == "[1,2,3]"

    def test_mapping_keeps_key_order(self):
        assert get_json({"width": 10, "height": 20}) == '{"width":10,"height":20}'

    def test_dataclass(self):
        assert get_json(Rectangle(10, 20)) == '{"width":10,"height":20}'

    def test_unserializable(self):
        with pytest.raises(TypeError):
            get_json(object())


class TestFromJson:
    def test_instance_of_class(self):
        c = from_json(Circle, '{"radius":10}')
        assert isinstance(c, Circle)
        assert c.radius == 10
        assert c.get_circumference() == pytest.approx(62.8)

    def test_round_trip_rectangle(self):
        r = from_json(Rectangle, get_json(Rectangle(10, 20)))
        assert r.get_area() == 200
        assert r == Rectangle(10, 20)

    def test_slotted_class(self):
        p = from_json(Point, '{"x":3,"y":-4}')
        assert isinstance(p, Point)
        assert p.norm() == 7

    def test_non_object_json(self):
        with pytest.raises(TypeError):
            from_json(Circle, "[1, 2]")
