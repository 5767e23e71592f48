import os
from dataclasses import dataclass

from utils.load_secrets import load_env_vars

DEFAULT_CAMPUS_DATA_PATH = os.path.join(os.path.dirname(__file__), "campus_data.toml")
DEFAULT_MAP_TILES_URL = (
    "https://server.arcgisonline.com/ArcGIS/rest/services/"
    "World_Imagery/MapServer/tile/{z}/{y}/{x}"
)


@dataclass(frozen=True)
class Settings:
    campus_data_path: str
    default_persona: str
    map_tiles_url: str
    map_zoom: int
    log_level: str

    def __init__(self):
        load_env_vars()
        object.__setattr__(
            self,
            "campus_data_path",
            os.getenv("CAMPUS_DATA_PATH", DEFAULT_CAMPUS_DATA_PATH).strip(),
        )
        object.__setattr__(
            self, "default_persona", os.getenv("DEFAULT_PERSONA", "new-student").strip()
        )
        object.__setattr__(
            self, "map_tiles_url", os.getenv("MAP_TILES_URL", DEFAULT_MAP_TILES_URL).strip()
        )
        object.__setattr__(self, "map_zoom", int(os.getenv("MAP_ZOOM", "17").strip()))
        object.__setattr__(self, "log_level", os.getenv("LOG_LEVEL", "INFO").strip().upper())


SETTINGS = Settings()
