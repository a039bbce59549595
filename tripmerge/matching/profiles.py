"""
Field weight tables for every entity kind.

Weights of one kind sum to 1.0. Event end times are left out on purpose:
events with the same start but different end are still the same event.
"""

from dataclasses import dataclass
from typing import Dict, List

from ..core.record import EntityKind
from .scorer import FieldKind, FieldRule


@dataclass(frozen=True)
class EntityProfile:
    """Comparison configuration of one entity kind."""
    kind: EntityKind
    rules: List[FieldRule]

    @property
    def weights(self) -> Dict[str, float]:
        return {rule.name: rule.weight for rule in self.rules}


TRIP_PROFILE = EntityProfile(EntityKind.TRIP, [
    FieldRule('name', FieldKind.STRING, 0.5),
    FieldRule('departureDate', FieldKind.DATE, 0.25),
    FieldRule('returnDate', FieldKind.DATE, 0.25),
])

# Flight numbers are identifiers: UA100 and UA101 are different flights,
# yet fuzzy scoring rates the pair 94 with every other field equal
FLIGHT_PROFILE = EntityProfile(EntityKind.FLIGHT, [
    FieldRule('airline', FieldKind.STRING, 0.2),
    FieldRule('flightNumber', FieldKind.EXACT, 0.3),
    FieldRule('origin', FieldKind.STRING, 0.15),
    FieldRule('destination', FieldKind.STRING, 0.15),
    FieldRule('departureDateTime', FieldKind.DATE, 0.2),
])

HOTEL_PROFILE = EntityProfile(EntityKind.HOTEL, [
    FieldRule('hotelName', FieldKind.STRING, 0.4),
    FieldRule('address', FieldKind.STRING, 0.2),
    FieldRule('checkInDateTime', FieldKind.DATE, 0.2),
    FieldRule('checkOutDateTime', FieldKind.DATE, 0.2),
])

TRANSPORTATION_PROFILE = EntityProfile(EntityKind.TRANSPORTATION, [
    FieldRule('type', FieldKind.STRING, 0.25),
    FieldRule('departureLocation', FieldKind.STRING, 0.25),
    FieldRule('arrivalLocation', FieldKind.STRING, 0.25),
    FieldRule('departureDateTime', FieldKind.DATE, 0.25),
])

CAR_RENTAL_PROFILE = EntityProfile(EntityKind.CAR_RENTAL, [
    FieldRule('pickupLocation', FieldKind.STRING, 0.25),
    FieldRule('dropoffLocation', FieldKind.STRING, 0.25),
    FieldRule('pickupDateTime', FieldKind.DATE, 0.25),
    FieldRule('dropoffDateTime', FieldKind.DATE, 0.25),
])

# Start dates compare in the existing event's own timezone
EVENT_PROFILE = EntityProfile(EntityKind.EVENT, [
    FieldRule('name', FieldKind.STRING, 0.45),
    FieldRule('location', FieldKind.STRING, 0.35),
    FieldRule('startDateTime', FieldKind.DATE_TIMEZONE, 0.2, timezone_field='timezone'),
])

# voucherNumber carries half the weight and must match exactly: vouchers
# differing in one character of their code are different vouchers, and
# fuzzy scoring would still rate UPGRADE2025 against UPGRADE2024 above 90
VOUCHER_PROFILE = EntityProfile(EntityKind.VOUCHER, [
    FieldRule('voucherNumber', FieldKind.EXACT, 0.5),
    FieldRule('type', FieldKind.STRING, 0.2),
    FieldRule('issuer', FieldKind.STRING, 0.15),
    FieldRule('expirationDate', FieldKind.DATE, 0.15),
])

COMPANION_PROFILE = EntityProfile(EntityKind.COMPANION, [
    FieldRule('name', FieldKind.STRING, 0.6),
    FieldRule('email', FieldKind.STRING, 0.4),
])

PROFILES: Dict[EntityKind, EntityProfile] = {
    profile.kind: profile
    for profile in (
        TRIP_PROFILE,
        FLIGHT_PROFILE,
        HOTEL_PROFILE,
        TRANSPORTATION_PROFILE,
        CAR_RENTAL_PROFILE,
        EVENT_PROFILE,
        VOUCHER_PROFILE,
        COMPANION_PROFILE,
    )
}
