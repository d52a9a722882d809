"""Cryptographic provider handed to every GeoCryptArk operation.

The provider bundles the primitives the envelope scheme consumes:

- a secure random byte source
- SHA-256
- PBKDF2-HMAC-SHA256
- AES-256-GCM encryption

The default implementation is backed by ``os.urandom``, ``hashlib`` and the
``cryptography`` package. Callers and tests can pass their own instance (or a
subclass / mock) instead of relying on the process-wide default.
"""
from __future__ import annotations

import hashlib
import os

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.ciphers.aead import AESGCM
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC


class CryptoProvider:
    def random_bytes(self, length: int) -> bytes:
        """Return ``length`` cryptographically secure random bytes."""
        return os.urandom(length)

    def sha256(self, data: bytes) -> bytes:
        return hashlib.sha256(data).digest()

    def pbkdf2_sha256(self, secret: bytes, salt: bytes, iterations: int, length: int = 32) -> bytes:
        kdf = PBKDF2HMAC(
            algorithm=hashes.SHA256(),
            length=length,
            salt=salt,
            iterations=iterations,
        )
        return kdf.derive(secret)

    def aes_gcm_encrypt(self, key: bytes, nonce: bytes, data: bytes) -> bytes:
        """Encrypt ``data`` and return ciphertext with the GCM tag appended."""
        return AESGCM(key).encrypt(nonce, data, None)


# module-level default provider, created once and never mutated
_default_provider = CryptoProvider()


def get_provider() -> CryptoProvider:
    return _default_provider


def resolve_provider(provider: CryptoProvider | None) -> CryptoProvider:
    return provider if provider is not None else _default_provider
