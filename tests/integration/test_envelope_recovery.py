"""
Integration tests: a recipient holding the password, salt and one location can
recover the plaintext from a multi-key payload using plain AES-GCM.
"""

import asyncio

import pytest
from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from geocryptark import (
    GeoCoordinate,
    MultiKeyEncryptResult,
    derive_key,
    from_base64,
    generate_geo_hash,
    multi_key_encrypt,
)
from geocryptark.security.kdf import derive_password_key

PASSWORD = "correct horse battery staple"
SALT = "c0ffee-salt"
LOCATIONS = [
    GeoCoordinate(40.7128, -74.0060),
    GeoCoordinate(51.5074, -0.1278),
    GeoCoordinate(-33.8688, 151.2093),
]


async def _recover(result, index, coord, password=PASSWORD):
    entry = result.keys[index]
    geo_hash = await generate_geo_hash(coord.lat, coord.lng, result.salt, password)
    kek = await derive_key(geo_hash, result.salt)
    session_key = AESGCM(kek).decrypt(
        from_base64(entry.key_iv), from_base64(entry.wrapped_key), None
    )
    first_layer = AESGCM(session_key).decrypt(
        from_base64(result.iv), from_base64(result.data), None
    )
    password_key = await derive_password_key(password, result.salt)
    return AESGCM(password_key).decrypt(bytes(12), first_layer, None).decode("utf-8")


@pytest.mark.asyncio
async def test_every_location_recovers_plaintext():
    result = await multi_key_encrypt("meet at the old lighthouse", LOCATIONS, SALT, PASSWORD)
    for index, coord in enumerate(LOCATIONS):
        assert await _recover(result, index, coord) == "meet at the old lighthouse"


@pytest.mark.asyncio
async def test_wire_format_survives_json():
    result = await multi_key_encrypt("ünïcödé payload", LOCATIONS[:1], SALT, PASSWORD)
    restored = MultiKeyEncryptResult.from_json(result.to_json())
    assert await _recover(restored, 0, LOCATIONS[0]) == "ünïcödé payload"


@pytest.mark.asyncio
async def test_wrong_location_cannot_unwrap():
    result = await multi_key_encrypt("secret", LOCATIONS[:1], SALT, PASSWORD)
    with pytest.raises(InvalidTag):
        await _recover(result, 0, GeoCoordinate(40.7129, -74.0060))


@pytest.mark.asyncio
async def test_wrong_password_cannot_unwrap():
    result = await multi_key_encrypt("secret", LOCATIONS[:1], SALT, PASSWORD)
    with pytest.raises(InvalidTag):
        await _recover(result, 0, LOCATIONS[0], password="wrong")


@pytest.mark.asyncio
async def test_keys_are_in_input_order():
    result = await multi_key_encrypt("ordered", LOCATIONS[:2], SALT, PASSWORD)
    # London's key cannot be opened with New York's location
    with pytest.raises(InvalidTag):
        await _recover(result, 1, LOCATIONS[0])


@pytest.mark.asyncio
async def test_concurrent_calls_do_not_interfere():
    results = await asyncio.gather(
        multi_key_encrypt("alpha", LOCATIONS[:1], SALT, PASSWORD),
        multi_key_encrypt("beta", LOCATIONS[1:2], SALT, PASSWORD),
    )
    assert await _recover(results[0], 0, LOCATIONS[0]) == "alpha"
    assert await _recover(results[1], 0, LOCATIONS[1]) == "beta"
