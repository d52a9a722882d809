"""Multi-recipient envelope encryption gated on geographic coordinates.

A plaintext is encrypted twice:

1. under a key derived from the common password and salt (zero nonce), then
2. under a random 256-bit session key (random nonce).

The session key is then wrapped once per coordinate, under a key derived from
that coordinate's geo-hash. Anyone holding the password, the salt and one of
the coordinates can re-derive a wrapping key; nobody else can.
"""
from __future__ import annotations

import logging
from typing import Iterable

from geocryptark.core.coordinates import validate_coordinate_list
from geocryptark.core.encoding import to_base64
from geocryptark.core.models import CoordinateLike, MultiKeyEncryptResult, WrappedKey
from .encryption import encrypt_first_layer, encrypt_with_key
from .geohash import generate_geo_hash
from .kdf import KEY_LEN, derive_key
from .provider import CryptoProvider, resolve_provider

logger = logging.getLogger(__name__)


def generate_session_key(provider: CryptoProvider | None = None) -> bytes:
    return resolve_provider(provider).random_bytes(KEY_LEN)


async def wrap_session_key(
    session_key: bytes,
    lat,
    lng,
    salt: str,
    common_password: str,
    provider: CryptoProvider | None = None,
) -> WrappedKey:
    """Encrypt the raw session key under the key derived from one location."""
    geo_hash = await generate_geo_hash(lat, lng, salt, common_password, provider=provider)
    kek = await derive_key(geo_hash, salt, provider=provider)
    blob = await encrypt_with_key(session_key, kek, provider=provider)
    return WrappedKey(wrapped_key=to_base64(blob.ciphertext), key_iv=to_base64(blob.nonce))


async def multi_key_encrypt(
    plaintext: str,
    coordinates: Iterable[CoordinateLike],
    salt: str,
    common_password: str,
    provider: CryptoProvider | None = None,
) -> MultiKeyEncryptResult:
    """
    Encrypt ``plaintext`` so it can be recovered from any one of ``coordinates``.

    Every coordinate is validated before any key is generated; an out-of-range
    pair raises InvalidCoordinateListError and nothing is encrypted. The
    returned ``keys`` are in the same order as ``coordinates``.
    """
    coords = validate_coordinate_list(coordinates)
    provider = resolve_provider(provider)
    logger.debug("Encrypting %d characters for %d locations", len(plaintext), len(coords))

    session_key = generate_session_key(provider)

    first = await encrypt_first_layer(plaintext, common_password, salt, provider=provider)
    second = await encrypt_with_key(first.ciphertext, session_key, provider=provider)

    keys = []
    for index, coord in enumerate(coords):
        wrapped = await wrap_session_key(
            session_key, coord.lat, coord.lng, salt, common_password, provider=provider
        )
        keys.append(wrapped)
        logger.debug("Wrapped session key for location %d", index)

    return MultiKeyEncryptResult(
        salt=salt,
        data=to_base64(second.ciphertext),
        iv=to_base64(second.nonce),
        keys=tuple(keys),
    )
