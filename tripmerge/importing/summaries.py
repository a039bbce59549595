"""One-line summaries of imported items for the preview table."""

from typing import Any, Mapping

from ..matching.dates import parse_datetime


def format_date(value: Any) -> str:
    """Format a date as ``Dec 15, 2025`` (UTC)."""
    if not value:
        return 'No date'
    parsed = parse_datetime(value)
    if parsed is None:
        return 'Invalid date'
    return f"{parsed:%b} {parsed.day}, {parsed.year}"


def _format_trip_date(value: Any) -> str:
    formatted = format_date(value)
    return 'No date' if formatted == 'Invalid date' else formatted


def format_trip_summary(trip: Mapping[str, Any]) -> str:
    departure = _format_trip_date(trip.get('departureDate'))
    returning = _format_trip_date(trip.get('returnDate'))
    return f"{departure} to {returning}"


def format_flight_summary(flight: Mapping[str, Any]) -> str:
    departure = flight.get('origin') or 'Unknown'
    arrival = flight.get('destination') or 'Unknown'
    return f"{departure} → {arrival} • {format_date(flight.get('departureDateTime'))}"


def format_hotel_summary(hotel: Mapping[str, Any]) -> str:
    hotel_name = hotel.get('hotelName') or 'Hotel'
    check_in = format_date(hotel.get('checkInDateTime'))
    check_out = format_date(hotel.get('checkOutDateTime'))
    return f"{hotel_name} • {check_in} to {check_out}"


def format_transportation_summary(trans: Mapping[str, Any]) -> str:
    departure = trans.get('departureLocation') or 'Unknown'
    arrival = trans.get('arrivalLocation') or 'Unknown'
    return f"{departure} → {arrival} • {format_date(trans.get('departureDateTime'))}"


def format_car_rental_summary(car_rental: Mapping[str, Any]) -> str:
    pickup = car_rental.get('pickupLocation') or 'Unknown'
    dropoff = car_rental.get('dropoffLocation') or 'Unknown'
    return f"{pickup} to {dropoff} • {format_date(car_rental.get('pickupDateTime'))}"


def format_event_summary(event: Mapping[str, Any]) -> str:
    location = event.get('location') or 'Unknown location'
    return f"{location} • {format_date(event.get('startDateTime'))}"


def format_voucher_summary(voucher: Mapping[str, Any]) -> str:
    voucher_type = voucher.get('type') or 'Voucher'
    total = voucher.get('totalValue')
    value = f"${total}" if total else 'Amount not specified'
    return f"{voucher_type} • {value}"


def format_companion_summary(companion: Mapping[str, Any]) -> str:
    return companion.get('email') or 'No email provided'
