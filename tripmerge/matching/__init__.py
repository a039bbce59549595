"""
Duplicate detection matching engine.

This module decides whether an imported travel item is the same as one the
user already has, using fuzzy string matching, date comparison and
per-entity weighted scoring against a fixed 90% threshold.
"""

from .similarity import calculate_string_similarity, get_edit_distance
from .dates import compare_dates, compare_dates_by_timezone
from .scorer import (
    DUPLICATE_THRESHOLD,
    DuplicateScorer,
    FieldKind,
    FieldRule,
    MatchResult,
    calculate_weighted_similarity,
)
from .profiles import EntityProfile, PROFILES
from .matcher import (
    DuplicateMatcher,
    DuplicateResult,
    check_duplicates,
    check_trip_duplicates,
    check_flight_duplicates,
    check_hotel_duplicates,
    check_transportation_duplicates,
    check_car_rental_duplicates,
    check_event_duplicates,
    check_voucher_duplicates,
    check_companion_duplicates,
    get_matcher,
)
from .display import get_duplicate_display_name

__all__ = [
    'calculate_string_similarity',
    'get_edit_distance',
    'compare_dates',
    'compare_dates_by_timezone',
    'DUPLICATE_THRESHOLD',
    'DuplicateScorer',
    'FieldKind',
    'FieldRule',
    'MatchResult',
    'calculate_weighted_similarity',
    'EntityProfile',
    'PROFILES',
    'DuplicateMatcher',
    'DuplicateResult',
    'check_duplicates',
    'check_trip_duplicates',
    'check_flight_duplicates',
    'check_hotel_duplicates',
    'check_transportation_duplicates',
    'check_car_rental_duplicates',
    'check_event_duplicates',
    'check_voucher_duplicates',
    'check_companion_duplicates',
    'get_matcher',
    'get_duplicate_display_name',
]
