import logging
from typing import Dict, List, Optional

import toml

from models.models import Location

logger = logging.getLogger(__name__)


class CampusDataClient:
    """Read-only registry of campus locations, keyed by unique name."""

    def __init__(self, data_path: str | None = None, records: List[Dict] | None = None):
        if records is None:
            if not data_path:
                raise ValueError("Either data_path or records is required")
            records = self._read(data_path)
        self.data_path = data_path
        self._locations: Dict[str, Location] = self._index(records)

    @staticmethod
    def _read(data_path: str) -> List[Dict]:
        with open(data_path, "r", encoding="utf-8") as f:
            data = toml.load(f)
        return data.get("locations", [])

    @staticmethod
    def _index(records: List[Dict]) -> Dict[str, Location]:
        # insertion order is the registry order used for tie-breaks
        locations: Dict[str, Location] = {}
        for record in records:
            location = Location.model_validate(record)
            if location.name in locations:
                raise ValueError(f"Duplicate location name: {location.name}")
            locations[location.name] = location
        logger.info("Loaded %d campus locations", len(locations))
        return locations

    def get(self, name: str) -> Optional[Location]:
        return self._locations.get(name)

    def all(self) -> List[Location]:
        return list(self._locations.values())

    def names(self) -> List[str]:
        return list(self._locations.keys())

    def __len__(self) -> int:
        return len(self._locations)
