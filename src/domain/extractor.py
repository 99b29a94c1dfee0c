"""Chained typed access to untyped JSON values.

A ``Field`` wraps one JSON value together with the path that led to it.
Navigation steps (``get``, ``items``, ``decoded``) return new fields and
coercions (``as_str``, ``as_bool``, ...) return plain Python values. Any step
that cannot be satisfied raises a ``ParsingError`` carrying the failing path,
so parsers can be written as flat field lists:

    stat = Field(entry).get("stat")
    fid = narrow_int32(stat.get("frontend_question_id"))
    status = Field(entry).get("status", None).as_str("Null")
"""

import json
from collections.abc import Iterator
from typing import Any

from domain.exceptions import MissingFieldError, SecondaryDecodeError, TypeMismatchError

_MISSING = object()

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


class Field:
    """A JSON value and its location in the payload."""

    __slots__ = ("value", "path")

    def __init__(self, value: Any, path: str = "$"):
        self.value = value
        self.path = path

    def __repr__(self) -> str:
        return f"Field({self.path}={self.value!r})"

    def get(self, key: str, default: Any = _MISSING) -> "Field":
        """Look up an object key.

        If ``default`` is given it is wrapped and returned when the key is
        absent, otherwise a missing key raises ``MissingFieldError``.
        """
        child_path = f"{self.path}.{key}"
        obj = self.as_object()
        if key not in obj:
            if default is _MISSING:
                raise MissingFieldError(child_path)
            return Field(default, child_path)
        return Field(obj[key], child_path)

    def items(self) -> Iterator["Field"]:
        """Iterate the elements of an array."""
        for index, item in enumerate(self.as_array()):
            yield Field(item, f"{self.path}[{index}]")

    def decoded(self) -> "Field":
        """Decode a string that itself holds JSON."""
        raw = self.as_str()
        try:
            return Field(json.loads(raw), self.path)
        except json.JSONDecodeError as e:
            raise SecondaryDecodeError(self.path, str(e)) from e

    def as_object(self) -> dict[str, Any]:
        if not isinstance(self.value, dict):
            raise TypeMismatchError(self.path, "object", self.value)
        return self.value

    def as_array(self) -> list[Any]:
        if not isinstance(self.value, list):
            raise TypeMismatchError(self.path, "array", self.value)
        return self.value

    def as_str(self, default: Any = _MISSING) -> str:
        """Return a string; null or absent values fall back to ``default`` if given."""
        if self.value is None and default is not _MISSING:
            return default
        if not isinstance(self.value, str):
            raise TypeMismatchError(self.path, "string", self.value)
        return self.value

    def as_bool(self) -> bool:
        if not isinstance(self.value, bool):
            raise TypeMismatchError(self.path, "bool", self.value)
        return self.value

    def as_float(self) -> float:
        # bool is an int subclass but never a JSON number
        if isinstance(self.value, bool) or not isinstance(self.value, (int, float)):
            raise TypeMismatchError(self.path, "number", self.value)
        try:
            return float(self.value)
        except OverflowError as e:
            raise TypeMismatchError(self.path, "number", self.value) from e

    def as_int(self) -> int:
        if isinstance(self.value, int) and not isinstance(self.value, bool):
            return self.value
        number = self.as_float()
        if not number.is_integer():
            raise TypeMismatchError(self.path, "integer", self.value)
        return int(self.value)


def narrow_int32(field: Field) -> int:
    """Read an integer field that must fit in 32 bits."""
    value = field.as_int()
    if not INT32_MIN <= value <= INT32_MAX:
        raise TypeMismatchError(field.path, "int32", value)
    return value
