""" Location hash binding a coordinate to the shared salt and password. """

from __future__ import annotations

import asyncio

from geocryptark.core.coordinates import canonical_coordinate_json, ensure_valid_coordinates
from geocryptark.core.encoding import to_base64
from .provider import CryptoProvider, resolve_provider


def geo_hash_message(lat, lng, salt: str, common_password: str) -> bytes:
    # canonical JSON || salt || password, no delimiters
    msg = canonical_coordinate_json(lat, lng) + salt + common_password
    return msg.encode("utf-8")


async def generate_geo_hash(
    lat,
    lng,
    salt: str,
    common_password: str,
    provider: CryptoProvider | None = None,
) -> str:
    """
    Return the base64 SHA-256 digest binding (lat, lng) to salt and password.

    Identical inputs always give identical output. Raises
    InvalidCoordinatesError before hashing if the pair is out of range.
    """
    ensure_valid_coordinates(lat, lng)
    provider = resolve_provider(provider)
    digest = await asyncio.to_thread(
        provider.sha256, geo_hash_message(lat, lng, salt, common_password)
    )
    return to_base64(digest)
