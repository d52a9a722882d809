"""
Value types passed between the encryption stages and returned to callers
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Sequence, Tuple, Union

from geocryptark.core.encoding import from_base64


@dataclass(frozen=True)
class GeoCoordinate:
    """A latitude/longitude pair in decimal degrees."""

    lat: float
    lng: float

    @classmethod
    def parse(cls, text: str) -> "GeoCoordinate":
        """Parse the ``"LAT,LNG"`` form used on the command line."""
        parts = [p.strip() for p in text.split(",")]
        if len(parts) != 2:
            raise ValueError(f"Expected LAT,LNG but got {text!r}")
        try:
            return cls(lat=float(parts[0]), lng=float(parts[1]))
        except ValueError:
            raise ValueError(f"Coordinates must be numbers, got {text!r}") from None

    @classmethod
    def coerce(cls, value: "CoordinateLike") -> "GeoCoordinate":
        # Accept instances, {"lat": .., "lng": ..} mappings and (lat, lng) pairs.
        if isinstance(value, cls):
            return value
        if isinstance(value, Mapping):
            return cls(lat=value["lat"], lng=value["lng"])
        lat, lng = value
        return cls(lat=lat, lng=lng)

    def to_dict(self) -> Dict[str, float]:
        return {"lat": self.lat, "lng": self.lng}


CoordinateLike = Union[GeoCoordinate, Mapping[str, float], Sequence[float]]


@dataclass(frozen=True)
class EncryptedBlob:
    # AES-GCM output: ciphertext with the 16-byte tag appended, plus the nonce used.
    ciphertext: bytes
    nonce: bytes


@dataclass(frozen=True)
class WrappedKey:
    """The session key encrypted under one coordinate's derived key."""

    wrapped_key: str
    key_iv: str

    def to_dict(self) -> Dict[str, str]:
        return {"wrappedKey": self.wrapped_key, "keyIv": self.key_iv}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "WrappedKey":
        try:
            wrapped_key = data["wrappedKey"]
            key_iv = data["keyIv"]
        except KeyError as e:
            raise ValueError(f"Wrapped key entry is missing field {e.args[0]!r}") from None
        from_base64(wrapped_key)
        from_base64(key_iv)
        return cls(wrapped_key=wrapped_key, key_iv=key_iv)


@dataclass(frozen=True)
class MultiKeyEncryptResult:
    """
    The persisted artifact of a multi-key encryption.

    ``data``/``iv`` hold the second-layer ciphertext and nonce (base64);
    ``keys`` holds one wrapped session key per input coordinate, in input order.
    """

    salt: str
    data: str
    iv: str
    keys: Tuple[WrappedKey, ...] = field(default_factory=tuple)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "salt": self.salt,
            "data": self.data,
            "iv": self.iv,
            "keys": [k.to_dict() for k in self.keys],
        }

    def to_json(self, indent: int | None = None) -> str:
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "MultiKeyEncryptResult":
        """
        Rebuild a result from its wire form.

        Checks structure and base64 validity only; nothing is decrypted.
        """
        missing = [name for name in ("salt", "data", "iv", "keys") if name not in data]
        if missing:
            raise ValueError(f"Encrypted payload is missing fields: {', '.join(missing)}")
        from_base64(data["data"])
        from_base64(data["iv"])
        keys = tuple(WrappedKey.from_dict(entry) for entry in data["keys"])
        return cls(salt=data["salt"], data=data["data"], iv=data["iv"], keys=keys)

    @classmethod
    def from_json(cls, text: str) -> "MultiKeyEncryptResult":
        return cls.from_dict(json.loads(text))
