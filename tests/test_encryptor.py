"""Tests for record encryption."""

import json

import pytest

from finrecord.errors import DecryptionError
from finrecord.processing.encryptor import (
    KEY_BYTES,
    decrypt_payload,
    encrypt_bytes,
    encrypt_record,
    serialize_record,
)
from tests.conftest import make_record


class TestSerializeRecord:
    def test_compact_separators(self):
        assert serialize_record({"a": 1, "b": [1, 2]}) == '{"a":1,"b":[1,2]}'

    def test_key_order_preserved(self):
        assert serialize_record({"b": 1, "a": 2}) == '{"b":1,"a":2}'

    def test_non_ascii_kept(self):
        assert serialize_record({"name": "Zoë"}) == '{"name":"Zoë"}'


class TestEncryptRecord:
    def test_round_trip(self):
        record = make_record()
        payload = encrypt_record(record)
        plaintext = decrypt_payload(payload.encrypted_data, payload.key)
        assert plaintext == serialize_record(record)
        assert json.loads(plaintext) == record

    def test_round_trip_non_ascii(self):
        record = {"merchant": "Café Zoë", "amount": 12.5}
        payload = encrypt_record(record)
        assert json.loads(decrypt_payload(payload.encrypted_data, payload.key)) == record

    def test_round_trip_scalar(self):
        payload = encrypt_record("just a string")
        assert decrypt_payload(payload.encrypted_data, payload.key) == '"just a string"'

    def test_key_is_256_bit_hex(self):
        payload = encrypt_record({})
        assert len(payload.key) == KEY_BYTES * 2
        bytes.fromhex(payload.key)

    def test_ciphertext_is_whole_blocks(self):
        payload = encrypt_record(make_record())
        assert len(bytes.fromhex(payload.encrypted_data)) % 16 == 0

    def test_fresh_key_per_call(self):
        first = encrypt_record(make_record())
        second = encrypt_record(make_record())
        assert first.key != second.key
        assert first.encrypted_data != second.encrypted_data

    def test_ciphertext_does_not_contain_plaintext(self):
        payload = encrypt_record({"firstName": "John"})
        assert "John".encode().hex() not in payload.encrypted_data


class TestFixedIv:
    def test_same_key_same_plaintext_same_ciphertext(self):
        """The constant IV makes encryption deterministic for a given key."""
        key = bytes(range(32))
        assert encrypt_bytes(b"identical", key) == encrypt_bytes(b"identical", key)

    def test_shared_prefix_leaks(self):
        key = bytes(range(32))
        a = encrypt_bytes(b"0123456789abcdef-tail-one", key)
        b = encrypt_bytes(b"0123456789abcdef-tail-two", key)
        assert a[:16] == b[:16]
        assert a[16:] != b[16:]


class TestDecryptErrors:
    def test_wrong_key(self):
        ciphertext = encrypt_bytes(b'{"amount":250}', bytes(range(32))).hex()
        wrong_key = bytes(range(1, 33)).hex()
        with pytest.raises(DecryptionError):
            decrypt_payload(ciphertext, wrong_key)

    def test_bad_hex(self):
        with pytest.raises(DecryptionError):
            decrypt_payload("not-hex", "00" * 32)

    def test_short_key(self):
        payload = encrypt_record({})
        with pytest.raises(DecryptionError):
            decrypt_payload(payload.encrypted_data, "00" * 16)

    def test_truncated_ciphertext(self):
        payload = encrypt_record(make_record())
        with pytest.raises(DecryptionError):
            decrypt_payload(payload.encrypted_data[:-2], payload.key)

    def test_empty_ciphertext(self):
        with pytest.raises(DecryptionError):
            decrypt_payload("", "00" * 32)
