"""TripMerge - find duplicate travel items when importing account data."""

__version__ = "0.1.0"

from .core.record import EntityKind, SupportsSnapshot, to_snapshot
from .matching import (
    calculate_string_similarity,
    compare_dates,
    check_trip_duplicates,
    check_flight_duplicates,
    check_hotel_duplicates,
    check_transportation_duplicates,
    check_car_rental_duplicates,
    check_event_duplicates,
    check_voucher_duplicates,
    check_companion_duplicates,
    get_duplicate_display_name,
    DuplicateResult,
)
from .importing import generate_preview_data

__all__ = [
    'EntityKind',
    'SupportsSnapshot',
    'to_snapshot',
    'calculate_string_similarity',
    'compare_dates',
    'check_trip_duplicates',
    'check_flight_duplicates',
    'check_hotel_duplicates',
    'check_transportation_duplicates',
    'check_car_rental_duplicates',
    'check_event_duplicates',
    'check_voucher_duplicates',
    'check_companion_duplicates',
    'get_duplicate_display_name',
    'DuplicateResult',
    'generate_preview_data',
]
