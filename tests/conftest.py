import pytest

from clients.campus_data_client import CampusDataClient

TEST_LOCATIONS = [
    {
        "name": "A",
        "lat": 18.6200,
        "lng": 73.9100,
        "type": "default",
        "description": "Reference point A.",
        "tags": ["alpha"],
        "icon": "🅰️",
    },
    {
        "name": "B",
        "lat": 18.6220,
        "lng": 73.9120,
        "type": "default",
        "description": "Reference point B.",
        "tags": ["bravo"],
        "icon": "🅱️",
    },
    {
        "name": "Central Library",
        "lat": 18.6212,
        "lng": 73.9118,
        "type": "study",
        "description": "Silent reading hall with long desks.",
        "landmarks": "Glass facade opposite the fountain",
        "tags": ["study", "quiet", "books"],
        "icon": "📚",
    },
    {
        "name": "Food Court",
        "lat": 18.6206,
        "lng": 73.9124,
        "type": "food",
        "description": "Snacks, chai and full meals.",
        "tags": ["food", "snack", "chai"],
        "icon": "🍔",
    },
    {
        "name": "Cricket Ground",
        "lat": 18.6232,
        "lng": 73.9106,
        "type": "sports",
        "description": "Main ground for matches.",
        "tags": ["sports", "cricket", "play"],
        "icon": "🏏",
    },
]


@pytest.fixture
def campus_data():
    return CampusDataClient(records=TEST_LOCATIONS)


@pytest.fixture
def locations(campus_data):
    return campus_data.all()
