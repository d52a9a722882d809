"""Security helpers: geo-hash, KDF and AES-GCM layers for GeoCryptArk.

This package provides:
- an injectable CryptoProvider wrapping the primitives
- geo-hash generation binding a location to the salt and common password
- PBKDF2-SHA256 key derivation
- AES-256-GCM encryption and the multi-location envelope built on it
"""

from .provider import CryptoProvider, get_provider
from .geohash import generate_geo_hash
from .kdf import derive_key, derive_password_key, PBKDF2_ITERATIONS
from .encryption import encrypt_with_key, encrypt_first_layer, FIRST_LAYER_NONCE
from .envelope import generate_session_key, wrap_session_key, multi_key_encrypt

__all__ = [
    "CryptoProvider",
    "get_provider",
    "generate_geo_hash",
    "derive_key",
    "derive_password_key",
    "PBKDF2_ITERATIONS",
    "encrypt_with_key",
    "encrypt_first_layer",
    "FIRST_LAYER_NONCE",
    "generate_session_key",
    "wrap_session_key",
    "multi_key_encrypt",
]
