"""
Import preview with duplicate detection.

Turns a parsed account export into a flat list of preview items, each
flagged when it duplicates something the user already has. Duplicates are
unselected by default so the user opts in to importing them.
"""

import logging
import uuid
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Mapping, Optional

from ..core.record import EntityKind, SupportsSnapshot, to_snapshot
from ..matching.matcher import check_duplicates
from . import summaries

logger = logging.getLogger(__name__)

SECTIONS = [
    'trips',
    'standaloneFlights',
    'standaloneHotels',
    'standaloneTransportation',
    'standaloneCarRentals',
    'standaloneEvents',
    'vouchers',
    'companions',
]


@dataclass(frozen=True)
class ItemSpec:
    """How one entity kind appears in the preview."""
    kind: EntityKind
    # Key of the existing-record pool in the current user's data
    pool: str
    # Key of the nested list inside an imported trip (trip children only)
    child_key: Optional[str]
    category: str
    name: Callable[[Mapping[str, Any]], str]
    summary: Callable[[Mapping[str, Any]], str]
    reference: Callable[[Mapping[str, Any]], Dict[str, Any]]


def _flight_name(flight):
    return f"{flight.get('airline')} {flight.get('flightNumber')}"


def _car_rental_name(car_rental):
    return f"{car_rental.get('pickupLocation')} to {car_rental.get('dropoffLocation')}"


TRIP_SPEC = ItemSpec(
    kind=EntityKind.TRIP,
    pool='trips',
    child_key=None,
    category='trips',
    name=lambda trip: trip.get('name') or 'Untitled Trip',
    summary=summaries.format_trip_summary,
    reference=lambda trip: {'name': trip.get('name')},
)

FLIGHT_SPEC = ItemSpec(
    kind=EntityKind.FLIGHT,
    pool='allFlights',
    child_key='flights',
    category='flights',
    name=_flight_name,
    summary=summaries.format_flight_summary,
    reference=lambda flight: {
        'name': _flight_name(flight),
        'origin': flight.get('origin'),
        'destination': flight.get('destination'),
    },
)

HOTEL_SPEC = ItemSpec(
    kind=EntityKind.HOTEL,
    pool='allHotels',
    child_key='hotels',
    category='hotels',
    name=lambda hotel: hotel.get('hotelName') or 'Hotel',
    summary=summaries.format_hotel_summary,
    reference=lambda hotel: {'name': hotel.get('hotelName')},
)

TRANSPORTATION_SPEC = ItemSpec(
    kind=EntityKind.TRANSPORTATION,
    pool='allTransportation',
    child_key='transportation',
    category='transportation',
    name=lambda trans: trans.get('type') or 'Transportation',
    summary=summaries.format_transportation_summary,
    reference=lambda trans: {
        'name': f"{trans.get('type')}",
        'departureLocation': trans.get('departureLocation'),
        'arrivalLocation': trans.get('arrivalLocation'),
    },
)

CAR_RENTAL_SPEC = ItemSpec(
    kind=EntityKind.CAR_RENTAL,
    pool='allCarRentals',
    child_key='carRentals',
    category='carRentals',
    name=_car_rental_name,
    summary=summaries.format_car_rental_summary,
    reference=lambda car_rental: {'name': _car_rental_name(car_rental)},
)

EVENT_SPEC = ItemSpec(
    kind=EntityKind.EVENT,
    pool='allEvents',
    child_key='events',
    category='events',
    name=lambda event: event.get('name') or 'Event',
    summary=summaries.format_event_summary,
    reference=lambda event: {'name': event.get('name'), 'location': event.get('location')},
)

VOUCHER_SPEC = ItemSpec(
    kind=EntityKind.VOUCHER,
    pool='vouchers',
    child_key=None,
    category='vouchers',
    name=lambda voucher: voucher.get('voucherNumber') or 'Voucher',
    summary=summaries.format_voucher_summary,
    reference=lambda voucher: {'name': voucher.get('voucherNumber'), 'type': voucher.get('type')},
)

COMPANION_SPEC = ItemSpec(
    kind=EntityKind.COMPANION,
    pool='companions',
    child_key=None,
    category='companions',
    name=lambda companion: companion.get('name') or 'Companion',
    summary=summaries.format_companion_summary,
    reference=lambda companion: {'name': companion.get('name'), 'email': companion.get('email')},
)

TRIP_CHILD_SPECS = [FLIGHT_SPEC, HOTEL_SPEC, TRANSPORTATION_SPEC, CAR_RENTAL_SPEC, EVENT_SPEC]

# Standalone section name -> spec
STANDALONE_SPECS = {
    'standaloneFlights': FLIGHT_SPEC,
    'standaloneHotels': HOTEL_SPEC,
    'standaloneTransportation': TRANSPORTATION_SPEC,
    'standaloneCarRentals': CAR_RENTAL_SPEC,
    'standaloneEvents': EVENT_SPEC,
}


def _list_section(data: Mapping[str, Any], key: str) -> List[Any]:
    """Return the records listed under ``key``, skipping malformed entries."""
    value = data.get(key)
    if not isinstance(value, list):
        return []

    records = [
        record for record in value
        if isinstance(record, (Mapping, SupportsSnapshot))
    ]
    if len(records) < len(value):
        logger.warning(
            f"Skipped {len(value) - len(records)} malformed entries in '{key}'"
        )
    return records


class PreviewBuilder:
    """
    Accumulates preview items and counters for one import.

    Args:
        current_user_data: Existing records of the importing user, keyed by
            pool name (``trips``, ``allFlights``, ``vouchers``, ...)
    """

    def __init__(self, current_user_data: Optional[Mapping[str, Any]] = None):
        self.current_user_data = current_user_data or {}
        self._pools: Dict[str, List[Any]] = {}
        self.items: List[Dict[str, Any]] = []
        self.sections = {section: {'count': 0, 'duplicates': 0} for section in SECTIONS}
        self.stats = {'totalItems': 0, 'totalDuplicates': 0, 'totalStandalone': 0}

    def candidates(self, pool: str) -> List[Any]:
        """Existing records of one pool, read once per import."""
        if pool not in self._pools:
            self._pools[pool] = _list_section(self.current_user_data, pool)
        return self._pools[pool]

    def add_item(
        self,
        spec: ItemSpec,
        record: Any,
        category: str,
        section: Optional[str] = None,
        parent_trip_id: Optional[str] = None,
        standalone: bool = False,
    ) -> Dict[str, Any]:
        """
        Check one imported record for duplicates and add its preview item.

        Args:
            spec: Preview spec of the record's kind
            record: Imported record
            category: Preview category of the item
            section: Section counter to bump, if any
            parent_trip_id: Preview id of the owning trip (trip children)
            standalone: Whether the item counts as standalone

        Returns:
            The preview item
        """
        snapshot = to_snapshot(record)
        duplicate = check_duplicates(
            spec.kind, record, self.candidates(spec.pool)
        )

        item: Dict[str, Any] = {
            'id': str(uuid.uuid4()),
            'originalId': snapshot.get('id'),
        }
        if parent_trip_id is not None:
            item['parentTripId'] = parent_trip_id
        item.update({
            'category': category,
            'type': spec.kind.value,
            'name': spec.name(snapshot),
            'summary': spec.summary(snapshot),
            'isDuplicate': duplicate.is_duplicate,
            'duplicateOf': (
                spec.reference(to_snapshot(duplicate.duplicate_of))
                if duplicate.is_duplicate else None
            ),
            'duplicateSimilarity': duplicate.similarity or 0,
            'selected': not duplicate.is_duplicate,
            'data': record,
        })

        self.items.append(item)
        if section is not None:
            self.sections[section]['count'] += 1
            if duplicate.is_duplicate:
                self.sections[section]['duplicates'] += 1
        self.stats['totalItems'] += 1
        if duplicate.is_duplicate:
            self.stats['totalDuplicates'] += 1
        if standalone:
            self.stats['totalStandalone'] += 1

        return item

    def add_trip(self, trip: Any) -> Dict[str, Any]:
        """Add an imported trip and all of its nested items."""
        trip_item = self.add_item(TRIP_SPEC, trip, category='trips', section='trips')
        snapshot = to_snapshot(trip)

        children: Dict[str, List[str]] = {}
        for spec in TRIP_CHILD_SPECS:
            children[spec.child_key] = [
                self.add_item(spec, child, category=spec.category,
                              parent_trip_id=trip_item['id'])['id']
                for child in _list_section(snapshot, spec.child_key)
            ]

        trip_item['children'] = children
        return trip_item

    def to_dict(self) -> Dict[str, Any]:
        return {'items': self.items, 'sections': self.sections, 'stats': self.stats}


def generate_preview_data(
    import_data: Mapping[str, Any],
    current_user_data: Optional[Mapping[str, Any]] = None,
) -> Dict[str, Any]:
    """
    Process an import file and generate preview data with duplicate detection.

    Args:
        import_data: Parsed JSON data from an export file
        current_user_data: The importing user's existing data

    Returns:
        Dict with ``items``, per-section ``sections`` counters and ``stats``

    Raises:
        ValueError: If the import data or current user data is not a JSON
            object
    """
    if not isinstance(import_data, Mapping):
        raise ValueError(
            f"Import data must be a JSON object, got {type(import_data).__name__}"
        )
    if current_user_data is not None and not isinstance(current_user_data, Mapping):
        raise ValueError(
            "Current user data must be a JSON object, "
            f"got {type(current_user_data).__name__}"
        )

    builder = PreviewBuilder(current_user_data)

    for trip in _list_section(import_data, 'trips'):
        builder.add_trip(trip)

    for section, spec in STANDALONE_SPECS.items():
        for record in _list_section(import_data, section):
            builder.add_item(spec, record, category=section, section=section, standalone=True)

    for record in _list_section(import_data, 'vouchers'):
        builder.add_item(VOUCHER_SPEC, record, category='vouchers', section='vouchers')

    for record in _list_section(import_data, 'companions'):
        builder.add_item(COMPANION_SPEC, record, category='companions', section='companions')

    logger.info(
        f"Import preview: {builder.stats['totalItems']} items, "
        f"{builder.stats['totalDuplicates']} duplicates, "
        f"{builder.stats['totalStandalone']} standalone"
    )
    return builder.to_dict()
