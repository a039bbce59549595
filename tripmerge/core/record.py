"""Record snapshots for travel items.

Imported items arrive as parsed JSON mappings; existing items may come
from the persistence layer as row objects. Both are read through
``to_snapshot`` so the matchers only ever see plain mappings.
"""

from enum import Enum
from typing import Any, Dict, Mapping, Protocol, runtime_checkable


class EntityKind(Enum):
    """Kinds of travel items that can be checked for duplicates."""
    TRIP = "trip"
    FLIGHT = "flight"
    HOTEL = "hotel"
    TRANSPORTATION = "transportation"
    CAR_RENTAL = "carRental"
    EVENT = "event"
    VOUCHER = "voucher"
    COMPANION = "companion"

    @classmethod
    def from_value(cls, value: str) -> "EntityKind":
        """Look up a kind by its wire name (``carRental``, ``flight``, ...)."""
        for kind in cls:
            if kind.value == value:
                return kind
        raise ValueError(f"Unknown entity kind: {value}")


@runtime_checkable
class SupportsSnapshot(Protocol):
    """Anything that can hand out a plain key/value copy of itself."""

    def to_snapshot(self) -> Dict[str, Any]:
        ...


def to_snapshot(record: Any) -> Mapping[str, Any]:
    """
    Return a plain, read-only view of a record.

    Row objects implementing ``to_snapshot()`` are unwrapped; mappings are
    returned as they are. Errors raised by ``to_snapshot()`` propagate.

    Args:
        record: Imported mapping or persisted row object

    Returns:
        Mapping of field name to value
    """
    if isinstance(record, SupportsSnapshot):
        return record.to_snapshot()
    if record is None:
        return {}
    return record
