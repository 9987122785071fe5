"""Value types for parsed TOML documents."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, ClassVar, Iterator, Union


class ValueKind(Enum):
    Integer = auto()
    Float = auto()
    Boolean = auto()
    String = auto()
    Array = auto()
    Table = auto()


# ---------------------------------------------------------------------------
# Scalars
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class VInteger:
    value: int

    kind: ClassVar[ValueKind] = ValueKind.Integer


@dataclass(slots=True)
class VFloat:
    value: float

    kind: ClassVar[ValueKind] = ValueKind.Float


@dataclass(slots=True)
class VBool:
    value: bool

    kind: ClassVar[ValueKind] = ValueKind.Boolean


@dataclass(slots=True)
class VString:
    value: str

    kind: ClassVar[ValueKind] = ValueKind.String


# ---------------------------------------------------------------------------
# Containers
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class VArray:
    items: list[Value] = field(default_factory=list)

    kind: ClassVar[ValueKind] = ValueKind.Array


@dataclass(slots=True)
class VTable:
    table: Table

    kind: ClassVar[ValueKind] = ValueKind.Table


@dataclass
class Table:
    """Mapping of unique string keys to values, kept in insertion order."""

    entries: dict[str, Value] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.entries)

    def __contains__(self, key: object) -> bool:
        return key in self.entries

    def __iter__(self) -> Iterator[str]:
        return iter(self.entries)

    def get(self, key: str) -> Value | None:
        return self.entries.get(key)

    def set(self, key: str, value: Value) -> None:
        self.entries[key] = value

    def items(self):
        return self.entries.items()

    def to_dict(self) -> dict[str, Any]:
        """Return the table as nested plain ``dict``/``list``/scalar objects."""
        return {k: to_python(v) for k, v in self.entries.items()}


Value = Union[VInteger, VFloat, VBool, VString, VArray, VTable]


def to_python(value: Value) -> Any:
    """Convert a Value to the equivalent plain Python object."""
    if isinstance(value, (VInteger, VFloat, VBool, VString)):
        return value.value
    if isinstance(value, VArray):
        return [to_python(v) for v in value.items]
    if isinstance(value, VTable):
        return value.table.to_dict()
    raise TypeError(f"not a TOML value: {value!r}")
