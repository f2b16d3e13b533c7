"""Google geocoding helpers.

Two entrypoints:

- ``geocode_address(address)`` returns a ``GeocodeResult`` (lat/lng) or
  ``None`` when geocoding is unavailable. Used to fill in coordinates for
  locations saved with only an address.
- ``zipcodes_in_area(shape)`` turns a shape drawn on the service-area map
  (polygon, rectangle or circle) into the sorted postal codes it covers by
  sampling points inside it and reverse geocoding each one.

The API key comes from ``GOOGLE_MAPS_API_KEY`` with
``NEXT_PUBLIC_GOOGLE_MAPS_API_KEY`` as a fallback, so deployments sharing a
frontend ``.env`` work unchanged.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional
import logging
import math
import re

import anyio
import httpx

from app.core.config import settings

logger = logging.getLogger(__name__)

EARTH_RADIUS_M = 6371000
CIRCLE_SEGMENTS = 32
GRID_STEPS = 8
_ZIP_RE = re.compile(r"\d{5}")


class GeocodingUnavailable(RuntimeError):
    pass


class InvalidShape(ValueError):
    pass


@dataclass
class GeocodeResult:
    lat: float
    lng: float


def _timeout() -> httpx.Timeout:
    return httpx.Timeout(settings.GEOCODE_TIMEOUT, connect=1.0)


async def geocode_address_async(address: str, client: Optional[httpx.AsyncClient] = None) -> Optional[GeocodeResult]:
    """Forward geocode ``address``; ``None`` when disabled or nothing matched."""
    if not address or not address.strip():
        return None
    api_key = settings.maps_api_key
    if not api_key:
        return None

    params = {"address": address, "key": api_key}
    try:
        if client is None:
            async with httpx.AsyncClient(timeout=_timeout()) as http:
                res = await http.get(settings.GEOCODE_URL, params=params)
        else:
            res = await client.get(settings.GEOCODE_URL, params=params)
        res.raise_for_status()
        data = res.json()
    except (httpx.HTTPError, ValueError) as exc:
        logger.warning("Geocoding failed for address %r: %s", address, exc)
        return None
    results = data.get("results") or []
    if not results:
        return None
    loc = (results[0].get("geometry") or {}).get("location") or {}
    lat = loc.get("lat")
    lng = loc.get("lng")
    if lat is None or lng is None:
        return None
    return GeocodeResult(lat=float(lat), lng=float(lng))


def geocode_address(address: str) -> Optional[GeocodeResult]:
    """Sync wrapper for :func:`geocode_address_async` used by sync endpoints."""
    if not address or not address.strip():
        return None
    return anyio.run(geocode_address_async, address)


# Shapes


def postal_code_from_components(components: list[dict[str, Any]]) -> Optional[str]:
    for component in components:
        if "postal_code" in (component.get("types") or []):
            raw = component.get("long_name") or component.get("short_name")
            if not isinstance(raw, str):
                return None
            match = _ZIP_RE.search(raw)
            return match.group(0) if match else (raw.strip() or None)
    return None


def point_in_polygon(lng: float, lat: float, ring: list[list[float]]) -> bool:
    """Ray casting against a ring of ``[lng, lat]`` points."""
    inside = False
    n = len(ring)
    j = n - 1
    for i in range(n):
        xi, yi = ring[i][0], ring[i][1]
        xj, yj = ring[j][0], ring[j][1]
        if (yi > lat) != (yj > lat) and lng < (xj - xi) * (lat - yi) / (yj - yi) + xi:
            inside = not inside
        j = i
    return inside


def circle_ring(center_lng: float, center_lat: float, radius_m: float) -> list[list[float]]:
    lat_rad = math.radians(center_lat)
    d_lng = math.degrees(radius_m / (EARTH_RADIUS_M * math.cos(lat_rad)))
    d_lat = math.degrees(radius_m / EARTH_RADIUS_M)
    ring = []
    for i in range(CIRCLE_SEGMENTS):
        angle = (i / CIRCLE_SEGMENTS) * 2 * math.pi
        ring.append([center_lng + d_lng * math.cos(angle), center_lat + d_lat * math.sin(angle)])
    ring.append(ring[0])
    return ring


def shape_to_ring(shape: dict[str, Any]) -> Optional[list[list[float]]]:
    """Return the outer ring for a drawn shape, or ``None`` if unsupported.

    Accepts a bare ``{type, coordinates, properties}`` or one whose
    ``coordinates`` wraps a GeoJSON Feature or geometry object. Circles (and
    OpenLayers rectangles, which are a center plus radius) need
    ``properties.radius`` in metres.
    """
    coords = shape.get("coordinates")
    kind = str(shape.get("type") or "").lower()
    radius = (shape.get("properties") or {}).get("radius")

    if isinstance(coords, dict) and "geometry" in coords:
        geometry = coords.get("geometry") or {}
        kind = str(geometry.get("type") or kind).lower()
        coords = geometry.get("coordinates")
    if isinstance(coords, dict) and "coordinates" in coords:
        kind = str(coords.get("type") or kind).lower()
        coords = coords.get("coordinates")
    if not coords or not isinstance(coords, list):
        return None

    looks_like_ring = isinstance(coords[0], list) and len(coords[0]) > 0 and isinstance(coords[0][0], list)
    looks_like_point = len(coords) >= 2 and all(isinstance(c, (int, float)) for c in coords[:2])

    if radius and float(radius) > 0 and looks_like_point and kind in ("circle", "rectangle", "point"):
        return circle_ring(float(coords[0]), float(coords[1]), float(radius))

    if kind == "polygon" or looks_like_ring:
        ring = coords[0] if looks_like_ring else coords
        points = [[float(p[0]), float(p[1])] for p in ring if isinstance(p, list) and len(p) >= 2]
        return points if len(points) >= 3 else None
    return None


def sample_points(ring: list[list[float]], max_points: int) -> list[tuple[float, float]]:
    """Grid-sample up to ``max_points`` ``(lat, lng)`` points inside ``ring``."""
    lngs = [p[0] for p in ring]
    lats = [p[1] for p in ring]
    min_lng, max_lng = min(lngs), max(lngs)
    min_lat, max_lat = min(lats), max(lats)
    d_lng = (max_lng - min_lng) / GRID_STEPS
    d_lat = (max_lat - min_lat) / GRID_STEPS
    points: list[tuple[float, float]] = []
    for i in range(GRID_STEPS + 1):
        for j in range(GRID_STEPS + 1):
            if len(points) >= max_points:
                return points
            lng = min_lng + i * d_lng
            lat = min_lat + j * d_lat
            if point_in_polygon(lng, lat, ring):
                points.append((lat, lng))
    return points


async def reverse_geocode_postal_code(
    client: httpx.AsyncClient, lat: float, lng: float, api_key: str
) -> Optional[str]:
    res = await client.get(settings.GEOCODE_URL, params={"latlng": f"{lat},{lng}", "key": api_key})
    if res.status_code != 200:
        return None
    data = res.json()
    results = data.get("results")
    if data.get("status") != "OK" or not isinstance(results, list) or not results:
        return None
    components = results[0].get("address_components")
    if not isinstance(components, list):
        return None
    return postal_code_from_components(components)


async def zipcodes_in_area(
    shape: dict[str, Any], client: Optional[httpx.AsyncClient] = None
) -> list[str]:
    """Sorted, de-duplicated postal codes covered by ``shape``.

    Raises ``InvalidShape`` for unsupported shapes and
    ``GeocodingUnavailable`` when no API key is configured.
    """
    ring = shape_to_ring(shape)
    if ring is None:
        raise InvalidShape(
            "Could not get polygon from shape. Supported: polygon, rectangle, circle (with properties.radius)."
        )
    points = sample_points(ring, settings.ZIPCODE_SAMPLE_LIMIT)
    if not points:
        return []
    api_key = settings.maps_api_key
    if not api_key:
        raise GeocodingUnavailable("Google Maps API key not configured")

    async def _collect(http: httpx.AsyncClient) -> set[str]:
        found: set[str] = set()
        for lat, lng in points:
            code = await reverse_geocode_postal_code(http, lat, lng, api_key)
            if code:
                found.add(code)
        return found

    if client is None:
        async with httpx.AsyncClient(timeout=_timeout()) as http:
            zips = await _collect(http)
    else:
        zips = await _collect(client)
    logger.info("Resolved %d zip codes from %d sample points", len(zips), len(points))
    return sorted(zips)
