import logging
from concurrent.futures import Future
from typing import Any, Mapping, Optional

from models.models import GeoPoint

logger = logging.getLogger(__name__)


class PositionDenied(Exception):
    """The device position is unavailable or access to it was refused."""


class GeolocationClient:
    """
    One-shot device position lookup.

    The browser shares its position by opening the app with ``?lat=..&lng=..``
    in the URL (or any other mapping passed as ``source``). Each request
    resolves exactly once, either with a ``GeoPoint`` or with
    ``PositionDenied``. There is no retry, timeout or cancellation.
    """

    def request_position(self, source: Mapping[str, Any]) -> "Future[GeoPoint]":
        future: "Future[GeoPoint]" = Future()
        try:
            point = self._parse(source)
        except PositionDenied as e:
            logger.info("Geolocation unavailable: %s", e)
            future.set_exception(e)
        else:
            logger.info("User location obtained: %s, %s", point.lat, point.lng)
            future.set_result(point)
        return future

    @staticmethod
    def _parse(source: Mapping[str, Any]) -> GeoPoint:
        raw_lat, raw_lng = source.get("lat"), source.get("lng")
        if raw_lat is None or raw_lng is None:
            raise PositionDenied("no position shared")
        try:
            lat, lng = float(raw_lat), float(raw_lng)
        except (TypeError, ValueError):
            raise PositionDenied(f"unreadable position {raw_lat!r}, {raw_lng!r}")
        if not (-90 <= lat <= 90 and -180 <= lng <= 180):
            raise PositionDenied(f"position out of range {lat}, {lng}")
        return GeoPoint(lat=lat, lng=lng)

    @staticmethod
    def resolve(future: "Future[GeoPoint]") -> Optional[GeoPoint]:
        try:
            return future.result()
        except PositionDenied:
            return None
