"""Unit tests for the value types."""

import dataclasses
import json

import pytest

from geocryptark.core.models import (
    EncryptedBlob,
    GeoCoordinate,
    MultiKeyEncryptResult,
    WrappedKey,
)


@pytest.fixture
def sample_result():
    return MultiKeyEncryptResult(
        salt="test salt",
        data="ZGF0YQ==",
        iv="AAAAAAAAAAAAAAAA",
        keys=(
            WrappedKey(wrapped_key="a2V5MQ==", key_iv="aXYxaXYxaXYxaXYx"),
            WrappedKey(wrapped_key="a2V5Mg==", key_iv="aXYyaXYyaXYyaXYy"),
        ),
    )


def test_geo_coordinate_is_immutable():
    coord = GeoCoordinate(1.0, 2.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        coord.lat = 3.0


def test_geo_coordinate_parse():
    assert GeoCoordinate.parse("40.7128,-74.0060") == GeoCoordinate(40.7128, -74.006)
    assert GeoCoordinate.parse(" -33.5 , 151 ") == GeoCoordinate(-33.5, 151.0)


@pytest.mark.parametrize("text", ["40.7", "1,2,3", "north,east", ""])
def test_geo_coordinate_parse_rejects_malformed(text):
    with pytest.raises(ValueError):
        GeoCoordinate.parse(text)


def test_geo_coordinate_coerce_variants():
    coord = GeoCoordinate(1.0, 2.0)
    assert GeoCoordinate.coerce(coord) is coord
    assert GeoCoordinate.coerce((1.0, 2.0)) == coord
    assert GeoCoordinate.coerce({"lat": 1.0, "lng": 2.0}) == coord
    assert coord.to_dict() == {"lat": 1.0, "lng": 2.0}


def test_encrypted_blob_fields():
    blob = EncryptedBlob(ciphertext=b"ct", nonce=b"\x00" * 12)
    assert blob.ciphertext == b"ct"
    assert len(blob.nonce) == 12


def test_result_to_dict_uses_wire_names(sample_result):
    assert sample_result.to_dict() == {
        "salt": "test salt",
        "data": "ZGF0YQ==",
        "iv": "AAAAAAAAAAAAAAAA",
        "keys": [
            {"wrappedKey": "a2V5MQ==", "keyIv": "aXYxaXYxaXYxaXYx"},
            {"wrappedKey": "a2V5Mg==", "keyIv": "aXYyaXYyaXYyaXYy"},
        ],
    }


def test_result_json_roundtrip(sample_result):
    text = sample_result.to_json()
    assert json.loads(text)["salt"] == "test salt"
    assert MultiKeyEncryptResult.from_json(text) == sample_result


def test_result_from_dict_missing_fields():
    with pytest.raises(ValueError, match="data, iv"):
        MultiKeyEncryptResult.from_dict({"salt": "s", "keys": []})


def test_result_from_dict_bad_base64(sample_result):
    payload = sample_result.to_dict()
    payload["data"] = "not base64!"
    with pytest.raises(ValueError):
        MultiKeyEncryptResult.from_dict(payload)


def test_wrapped_key_from_dict_missing_field():
    with pytest.raises(ValueError, match="keyIv"):
        WrappedKey.from_dict({"wrappedKey": "a2V5MQ=="})
