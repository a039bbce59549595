"""
Duplicate matcher for imported travel items.

Candidates are scanned in the order given and the first one scoring at or
above the threshold is reported. There is no search for the best match:
with ambiguous input the earliest candidate wins, so callers should pass
existing records in a stable order (e.g. creation order).
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Optional

from ..core.record import EntityKind, to_snapshot
from .profiles import PROFILES, EntityProfile
from .scorer import DUPLICATE_THRESHOLD, DuplicateScorer, FieldKind

logger = logging.getLogger(__name__)


@dataclass
class DuplicateResult:
    """Outcome of checking one imported record against existing ones."""
    is_duplicate: bool
    # The existing record as passed in, not its snapshot
    duplicate_of: Optional[Any] = None
    similarity: Optional[int] = None

    def __bool__(self) -> bool:
        return self.is_duplicate

    def to_dict(self) -> Dict[str, Any]:
        """Wire representation: ``{isDuplicate, duplicateOf?, similarity?}``."""
        data: Dict[str, Any] = {'isDuplicate': self.is_duplicate}
        if self.is_duplicate:
            data['duplicateOf'] = to_snapshot(self.duplicate_of)
            data['similarity'] = self.similarity
        return data


class DuplicateMatcher:
    """
    Checks imported records of one entity kind against existing records.

    Args:
        profile: Field rules of the entity kind
        scorer: Scorer to use (a fresh DuplicateScorer by default)
    """

    def __init__(self, profile: EntityProfile, scorer: Optional[DuplicateScorer] = None):
        self.profile = profile
        self.scorer = scorer or DuplicateScorer()

    def find_duplicate(self, imported: Any, candidates: Iterable[Any]) -> DuplicateResult:
        """
        Find the first existing record that duplicates ``imported``.

        Args:
            imported: Imported record (mapping or snapshot-capable row)
            candidates: Existing records, scanned in order

        Returns:
            DuplicateResult referencing the original candidate object
        """
        imported_snapshot = to_snapshot(imported)

        for existing in candidates or []:
            existing_snapshot = to_snapshot(existing)
            result = self.scorer.calculate_match_score(
                imported_snapshot, existing_snapshot, self.profile.rules
            )

            if logger.isEnabledFor(logging.DEBUG):
                self._log_comparison(imported_snapshot, existing_snapshot, result)

            if result.overall_score >= DUPLICATE_THRESHOLD:
                return DuplicateResult(
                    is_duplicate=True,
                    duplicate_of=existing,
                    similarity=round(result.overall_score),
                )

        return DuplicateResult(is_duplicate=False)

    def _log_comparison(self, imported, existing, result) -> None:
        """Log both sides of every compared field with its sub-score."""
        fields = {}
        for rule in self.profile.rules:
            fields[rule.name] = {
                'imported': imported.get(rule.name),
                'existing': existing.get(rule.name),
                'score': round(result.field_scores[rule.name], 2),
            }
            if rule.kind is FieldKind.DATE_TIMEZONE:
                tz_field = rule.timezone_field or 'timezone'
                fields[rule.name]['importedTimezone'] = imported.get(tz_field)
                fields[rule.name]['existingTimezone'] = existing.get(tz_field)
                fields[rule.name]['comparisonTimezone'] = existing.get(tz_field) or 'UTC'

        logger.debug(
            f"{self.profile.kind.value} duplicate check: similarity="
            f"{round(result.overall_score)} threshold={DUPLICATE_THRESHOLD} "
            f"duplicate={result.overall_score >= DUPLICATE_THRESHOLD} fields={fields}"
        )


_matchers = {kind: DuplicateMatcher(profile) for kind, profile in PROFILES.items()}


def get_matcher(kind: EntityKind) -> DuplicateMatcher:
    """Return the shared matcher for an entity kind."""
    return _matchers[kind]


def check_duplicates(kind: EntityKind, imported: Any, existing: Iterable[Any]) -> DuplicateResult:
    """Check an imported record of any kind against existing records."""
    return get_matcher(kind).find_duplicate(imported, existing)


def check_trip_duplicates(imported_trip, existing_trips) -> DuplicateResult:
    """Compares name, departureDate and returnDate."""
    return check_duplicates(EntityKind.TRIP, imported_trip, existing_trips)


def check_flight_duplicates(imported_flight, existing_flights) -> DuplicateResult:
    """Compares airline, flightNumber, origin, destination and departureDateTime."""
    return check_duplicates(EntityKind.FLIGHT, imported_flight, existing_flights)


def check_hotel_duplicates(imported_hotel, existing_hotels) -> DuplicateResult:
    """Compares hotelName, address, checkInDateTime and checkOutDateTime."""
    return check_duplicates(EntityKind.HOTEL, imported_hotel, existing_hotels)


def check_transportation_duplicates(imported_transportation, existing_transportation) -> DuplicateResult:
    """Compares type, departureLocation, arrivalLocation and departureDateTime."""
    return check_duplicates(EntityKind.TRANSPORTATION, imported_transportation, existing_transportation)


def check_car_rental_duplicates(imported_car_rental, existing_car_rentals) -> DuplicateResult:
    """Compares pickupLocation, dropoffLocation, pickupDateTime and dropoffDateTime."""
    return check_duplicates(EntityKind.CAR_RENTAL, imported_car_rental, existing_car_rentals)


def check_event_duplicates(imported_event, existing_events) -> DuplicateResult:
    """
    Compares name, location and startDateTime.

    The start date is compared as a local date in the existing event's
    timezone (UTC if it has none).
    """
    return check_duplicates(EntityKind.EVENT, imported_event, existing_events)


def check_voucher_duplicates(imported_voucher, existing_vouchers) -> DuplicateResult:
    """Compares voucherNumber, type, issuer and expirationDate."""
    return check_duplicates(EntityKind.VOUCHER, imported_voucher, existing_vouchers)


def check_companion_duplicates(imported_companion, existing_companions) -> DuplicateResult:
    """Compares name and email."""
    return check_duplicates(EntityKind.COMPANION, imported_companion, existing_companions)
