"""Display names for duplicate items shown in the import preview."""

from typing import Any, Callable, Dict, Mapping

from ..core.record import to_snapshot


def _first(value: Any, fallback: str) -> Any:
    return value or fallback


# Template-built labels always render, even with missing fields
# ("None None" for a flight without airline and number).
_DISPLAY_NAMES: Dict[str, Callable[[Mapping[str, Any]], Any]] = {
    'trip': lambda item: _first(item.get('name'), 'Untitled Trip'),
    'flight': lambda item: _first(f"{item.get('airline')} {item.get('flightNumber')}", 'Flight'),
    'hotel': lambda item: _first(item.get('name'), 'Hotel'),
    'transportation': lambda item: _first(
        f"{item.get('type')} - {item.get('departureLocation')} to {item.get('arrivalLocation')}",
        'Transportation',
    ),
    'carRental': lambda item: _first(
        f"{item.get('pickupLocation')} to {item.get('dropoffLocation')}", 'Car Rental'
    ),
    'event': lambda item: _first(item.get('name'), 'Event'),
    'voucher': lambda item: _first(item.get('voucherNumber'), 'Voucher'),
    'companion': lambda item: _first(item.get('name'), 'Companion'),
}


def get_duplicate_display_name(item: Mapping[str, Any], type: str) -> str:
    """
    Get a display name for a duplicate item.

    Args:
        item: Record snapshot
        type: Entity kind name (``trip``, ``flight``, ``carRental``, ...)

    Returns:
        Human readable label, ``'Item'`` for unknown kinds
    """
    formatter = _DISPLAY_NAMES.get(type)
    if formatter is None:
        return 'Item'
    return formatter(to_snapshot(item))
