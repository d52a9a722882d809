"""
AES-256-GCM encryption used for every layer of the envelope.

Each call to :func:`encrypt_with_key` draws a fresh 96-bit nonce. The one
exception is :func:`encrypt_first_layer`, which always uses an all-zero nonce
under a key derived from the common password and salt. That keeps existing
payloads decryptable, but it also means the same (password, salt) pair must
not be used to encrypt more than one plaintext: two first-layer ciphertexts
under the same key and nonce leak the XOR of their plaintexts and allow tag
forgery. Use a fresh salt per encryption.
"""

from __future__ import annotations

import asyncio

from geocryptark.core.encoding import to_bytes
from geocryptark.core.models import EncryptedBlob
from .kdf import derive_password_key
from .provider import CryptoProvider, resolve_provider

NONCE_SIZE = 12
FIRST_LAYER_NONCE = bytes(NONCE_SIZE)


async def encrypt_with_key(
    data: bytes | str,
    key: bytes,
    provider: CryptoProvider | None = None,
) -> EncryptedBlob:
    """
    Encrypt ``data`` under ``key`` with a fresh random nonce.

    The returned ciphertext carries the 16-byte GCM tag at its end; the nonce
    is returned alongside it and is not secret.
    """
    provider = resolve_provider(provider)
    nonce = provider.random_bytes(NONCE_SIZE)
    ct = await asyncio.to_thread(provider.aes_gcm_encrypt, key, nonce, to_bytes(data))
    return EncryptedBlob(ciphertext=ct, nonce=nonce)


async def encrypt_first_layer(
    plaintext: str,
    password: str,
    salt: str,
    provider: CryptoProvider | None = None,
) -> EncryptedBlob:
    """
    Encrypt ``plaintext`` under the password-derived key and the zero nonce.

    See the module docstring for the nonce-reuse caveat.
    """
    provider = resolve_provider(provider)
    key = await derive_password_key(password, salt, provider=provider)
    ct = await asyncio.to_thread(
        provider.aes_gcm_encrypt, key, FIRST_LAYER_NONCE, to_bytes(plaintext)
    )
    return EncryptedBlob(ciphertext=ct, nonce=FIRST_LAYER_NONCE)
