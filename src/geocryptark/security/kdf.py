"""PBKDF2 key derivation for the per-location and password layers."""
from __future__ import annotations

import asyncio
from typing import Dict

from geocryptark.core.encoding import to_bytes
from .provider import CryptoProvider, resolve_provider

# Changing either value breaks compatibility with previously encrypted payloads.
PBKDF2_ITERATIONS = 100_000
KEY_LEN = 32


async def derive_key(
    secret_material: bytes | str,
    salt: bytes | str,
    provider: CryptoProvider | None = None,
) -> bytes:
    """
    Derive an AES-256 key from secret material using PBKDF2-HMAC-SHA256.
    Strings are UTF-8 encoded. Returns raw derived key bytes.
    """
    provider = resolve_provider(provider)
    return await asyncio.to_thread(
        provider.pbkdf2_sha256,
        to_bytes(secret_material),
        to_bytes(salt),
        PBKDF2_ITERATIONS,
        KEY_LEN,
    )


async def derive_password_key(
    password: str,
    salt: str,
    provider: CryptoProvider | None = None,
) -> bytes:
    # First-layer key: password||salt is the key material, salt is also the KDF salt.
    return await derive_key(password + salt, salt, provider=provider)


def kdf_params_to_dict() -> Dict:
    return {
        "algo": "pbkdf2-sha256",
        "iterations": PBKDF2_ITERATIONS,
        "key_len": KEY_LEN,
    }
