"""Small object helpers: a rectangle value and JSON round-tripping."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, is_dataclass
from typing import Any, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Rectangle:
    """Rectangle with a computed area.

    >>> Rectangle(10, 20).get_area()
    200
    """

    width: float
    height: float

    def get_area(self) -> float:
        return self.width * self.height


def _encode(obj: Any) -> Any:
    if is_dataclass(obj) and not isinstance(obj, type):
        return asdict(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def get_json(obj: Any) -> str:
    """Return the compact JSON representation of *obj*.

    ``[1, 2, 3]`` becomes ``'[1,2,3]'``; dataclass instances serialize as
    their field mapping.
    """
    return json.dumps(obj, separators=(",", ":"), default=_encode)


def from_json(cls: type[T], text: str) -> T:
    """Build an instance of *cls* from JSON without calling ``__init__``.

    The decoded mapping is assigned onto the new instance as attributes, so
    methods of *cls* (e.g. ``Rectangle.get_area``) work on the result.
    """
    data = json.loads(text)
    if not isinstance(data, dict):
        raise TypeError(
            f"Expected a JSON object for {cls.__name__}, got {type(data).__name__}"
        )
    obj = cls.__new__(cls)  # type: ignore[call-overload]
    for key, value in data.items():
        object.__setattr__(obj, key, value)
    return obj
