"""Tests for the import preview."""

import pytest
from tripmerge.importing import SECTIONS, generate_preview_data
from tripmerge.importing.summaries import (
    format_date,
    format_trip_summary,
    format_flight_summary,
    format_hotel_summary,
    format_voucher_summary,
    format_companion_summary,
    format_event_summary,
    format_car_rental_summary,
)


PARIS_TRIP = {
    'id': 'trip-1',
    'name': 'Paris Vacation',
    'departureDate': '2025-12-15',
    'returnDate': '2025-12-22',
    'flights': [
        {
            'id': 'flight-1',
            'airline': 'Air France',
            'flightNumber': 'AF66',
            'origin': 'LAX',
            'destination': 'CDG',
            'departureDateTime': '2025-12-15T18:00:00Z',
        },
    ],
    'hotels': [
        {
            'id': 'hotel-1',
            'hotelName': 'Hilton Paris Opera',
            'address': '108 Rue Saint-Lazare',
            'checkInDateTime': '2025-12-16T15:00:00Z',
            'checkOutDateTime': '2025-12-22T11:00:00Z',
        },
    ],
    'events': [
        {
            'id': 'event-1',
            'name': 'Louvre Tour',
            'location': 'Louvre',
            'startDateTime': '2025-12-17T09:00:00Z',
        },
    ],
}


@pytest.fixture
def import_data():
    """A small account export."""
    return {
        'trips': [PARIS_TRIP],
        'standaloneFlights': [
            {
                'id': 'flight-2',
                'airline': 'Delta',
                'flightNumber': 'DL5',
                'origin': 'JFK',
                'destination': 'LAX',
                'departureDateTime': '2026-01-10T12:00:00Z',
            },
        ],
        'vouchers': [
            {
                'id': 'voucher-1',
                'voucherNumber': 'UPGRADE2025',
                'type': 'Upgrade',
                'issuer': 'Delta',
                'expirationDate': '2026-06-01',
                'totalValue': 150,
            },
        ],
        'companions': [
            {'id': 'companion-1', 'name': 'John Smith', 'email': 'john@example.com'},
        ],
    }


@pytest.fixture
def current_user_data():
    """Existing data already holding the Paris trip, its flight and the companion."""
    return {
        'trips': [dict(PARIS_TRIP, id='existing-trip')],
        'allFlights': [dict(PARIS_TRIP['flights'][0], id='existing-flight')],
        'companions': [{'id': 'existing-companion', 'name': 'John Smith', 'email': 'john@example.com'}],
    }


class TestGeneratePreviewData:
    """Tests for generate_preview_data."""

    def test_empty_import(self):
        preview = generate_preview_data({}, {})

        assert preview['items'] == []
        assert set(preview['sections']) == set(SECTIONS)
        assert preview['stats'] == {'totalItems': 0, 'totalDuplicates': 0, 'totalStandalone': 0}

    def test_non_object_rejected(self):
        with pytest.raises(ValueError):
            generate_preview_data([], {})

    def test_counts(self, import_data, current_user_data):
        preview = generate_preview_data(import_data, current_user_data)

        # trip + 3 children + standalone flight + voucher + companion
        assert preview['stats']['totalItems'] == 7
        assert preview['stats']['totalDuplicates'] == 3
        assert preview['stats']['totalStandalone'] == 1
        assert preview['sections']['trips'] == {'count': 1, 'duplicates': 1}
        assert preview['sections']['standaloneFlights'] == {'count': 1, 'duplicates': 0}
        assert preview['sections']['vouchers'] == {'count': 1, 'duplicates': 0}
        assert preview['sections']['companions'] == {'count': 1, 'duplicates': 1}

    def test_duplicate_items_unselected(self, import_data, current_user_data):
        preview = generate_preview_data(import_data, current_user_data)

        for item in preview['items']:
            assert item['selected'] is (not item['isDuplicate'])

    def test_trip_item(self, import_data, current_user_data):
        preview = generate_preview_data(import_data, current_user_data)
        trip_item = preview['items'][0]

        assert trip_item['type'] == 'trip'
        assert trip_item['originalId'] == 'trip-1'
        assert trip_item['name'] == 'Paris Vacation'
        assert trip_item['isDuplicate'] is True
        assert trip_item['duplicateOf'] == {'name': 'Paris Vacation'}
        assert trip_item['duplicateSimilarity'] == 100
        assert trip_item['summary'] == 'Dec 15, 2025 to Dec 22, 2025'
        assert trip_item['data'] is PARIS_TRIP

    def test_trip_children_linked(self, import_data, current_user_data):
        preview = generate_preview_data(import_data, current_user_data)
        items = {item['id']: item for item in preview['items']}
        trip_item = preview['items'][0]

        assert set(trip_item['children']) == {
            'flights', 'hotels', 'transportation', 'carRentals', 'events'
        }
        assert len(trip_item['children']['flights']) == 1
        assert trip_item['children']['transportation'] == []

        flight = items[trip_item['children']['flights'][0]]
        assert flight['parentTripId'] == trip_item['id']
        assert flight['category'] == 'flights'
        assert flight['isDuplicate'] is True
        assert flight['duplicateOf'] == {
            'name': 'Air France AF66',
            'origin': 'LAX',
            'destination': 'CDG',
        }

        hotel = items[trip_item['children']['hotels'][0]]
        assert hotel['isDuplicate'] is False
        assert hotel['duplicateOf'] is None
        assert hotel['duplicateSimilarity'] == 0

    def test_standalone_item(self, import_data, current_user_data):
        preview = generate_preview_data(import_data, current_user_data)
        standalone = [i for i in preview['items'] if i['category'] == 'standaloneFlights']

        assert len(standalone) == 1
        assert standalone[0]['name'] == 'Delta DL5'
        assert 'parentTripId' not in standalone[0]

    def test_missing_current_data(self, import_data):
        preview = generate_preview_data(import_data)
        assert preview['stats']['totalDuplicates'] == 0

    def test_non_list_sections_skipped(self):
        preview = generate_preview_data({'trips': 'oops', 'vouchers': None}, {})
        assert preview['stats']['totalItems'] == 0

    def test_malformed_entries_skipped(self):
        """Entries that are not objects are left out of the preview."""
        preview = generate_preview_data({
            'trips': ['oops', {'name': 'Rome', 'flights': [7]}],
            'companions': [42],
        }, {'trips': [None, 'x'], 'companions': [42]})

        assert preview['stats']['totalItems'] == 1
        assert preview['items'][0]['name'] == 'Rome'
        assert preview['items'][0]['children']['flights'] == []
        assert preview['sections']['companions'] == {'count': 0, 'duplicates': 0}

    def test_non_object_current_data_rejected(self):
        with pytest.raises(ValueError, match='Current user data'):
            generate_preview_data({}, ['trips'])

    def test_unique_preview_ids(self, import_data, current_user_data):
        preview = generate_preview_data(import_data, current_user_data)
        ids = [item['id'] for item in preview['items']]
        assert len(ids) == len(set(ids))


class TestSummaries:
    """Tests for preview summary strings."""

    def test_format_date(self):
        assert format_date('2025-12-15T18:00:00Z') == 'Dec 15, 2025'
        assert format_date(None) == 'No date'
        assert format_date('garbage') == 'Invalid date'

    def test_trip_summary_invalid_dates(self):
        assert format_trip_summary({'departureDate': 'garbage'}) == 'No date to No date'

    def test_flight_summary(self):
        flight = {'origin': 'LAX', 'departureDateTime': '2025-06-01T10:00:00Z'}
        assert format_flight_summary(flight) == 'LAX → Unknown • Jun 1, 2025'

    def test_hotel_summary(self):
        assert format_hotel_summary({}) == 'Hotel • No date to No date'

    def test_car_rental_summary(self):
        car = {'pickupLocation': 'LAX', 'dropoffLocation': 'SFO'}
        assert format_car_rental_summary(car) == 'LAX to SFO • No date'

    def test_event_summary(self):
        assert format_event_summary({}) == 'Unknown location • No date'

    def test_voucher_summary(self):
        assert format_voucher_summary({'type': 'Upgrade', 'totalValue': 150}) == 'Upgrade • $150'
        assert format_voucher_summary({}) == 'Voucher • Amount not specified'

    def test_companion_summary(self):
        assert format_companion_summary({'email': 'a@b.c'}) == 'a@b.c'
        assert format_companion_summary({}) == 'No email provided'
