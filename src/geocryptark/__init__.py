"""GeoCryptArk: location-gated multi-recipient envelope encryption."""

from geocryptark.core.coordinates import validate_coordinates
from geocryptark.core.encoding import from_base64, to_base64
from geocryptark.core.exceptions import (
    GeoCryptArkError,
    InvalidCoordinateListError,
    InvalidCoordinatesError,
)
from geocryptark.core.models import (
    EncryptedBlob,
    GeoCoordinate,
    MultiKeyEncryptResult,
    WrappedKey,
)
from geocryptark.security import (
    CryptoProvider,
    derive_key,
    encrypt_first_layer,
    encrypt_with_key,
    generate_geo_hash,
    multi_key_encrypt,
)

__version__ = "0.1.0"

__all__ = [
    "validate_coordinates",
    "generate_geo_hash",
    "derive_key",
    "encrypt_with_key",
    "encrypt_first_layer",
    "multi_key_encrypt",
    "to_base64",
    "from_base64",
    "GeoCoordinate",
    "EncryptedBlob",
    "WrappedKey",
    "MultiKeyEncryptResult",
    "CryptoProvider",
    "GeoCryptArkError",
    "InvalidCoordinatesError",
    "InvalidCoordinateListError",
]
