"""Field tables mapping between wire JSON and domain objects.

Each model declares an explicit table of ``FieldSpec`` entries. The table
is the single source of truth for both directions, so
``Model.from_wire(model.to_wire()) == model`` holds for every model.
"""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any, ClassVar, Self


def _identity(value: Any) -> Any:
    return value


@dataclass(frozen=True)
class FieldSpec:
    """One row of a field table: domain attribute name, wire key and converters."""

    attr: str
    wire: str
    decode: Callable[[Any], Any] = _identity
    encode: Callable[[Any], Any] = _identity


def timestamp_to_datetime(value: float) -> datetime:
    """Decode a unix timestamp (seconds) to an aware UTC datetime."""
    return datetime.fromtimestamp(value, tz=UTC)


def datetime_to_timestamp(value: datetime) -> float:
    return value.timestamp()


def optional(converter: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """Wrap a converter so that None passes through untouched."""

    def convert(value: Any) -> Any:
        return None if value is None else converter(value)

    return convert


def as_list(value: Any) -> list[Any]:
    """Copy a wire list, refusing anything that is not a JSON array.

    Raises:
        TypeError: If ``value`` is not a list.
    """
    if not isinstance(value, list):
        raise TypeError(f"expected a list, got {type(value).__name__}")
    return list(value)


def list_of(converter: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """Wrap a converter to apply to each element of a list."""

    def convert(values: Any) -> list[Any]:
        return [converter(value) for value in as_list(values)]

    return convert


TIMESTAMP = {"decode": timestamp_to_datetime, "encode": datetime_to_timestamp}


class WireModel:
    """Mixin for dataclasses that have a wire representation.

    Subclasses set ``wire_fields`` to their field table.
    """

    wire_fields: ClassVar[tuple[FieldSpec, ...]] = ()

    @classmethod
    def from_wire(cls, data: dict[str, Any]) -> Self:
        """Build a domain object from its wire representation.

        Raises:
            KeyError: If a wire key from the field table is missing.
        """
        return cls(**{spec.attr: spec.decode(data[spec.wire]) for spec in cls.wire_fields})

    def to_wire(self) -> dict[str, Any]:
        """Return the wire representation of this object."""
        return {spec.wire: spec.encode(getattr(self, spec.attr)) for spec in self.wire_fields}
