"""Symmetric encryption of transaction records.

Records are serialized the way JavaScript's JSON.stringify does it (compact,
key order preserved, non-ASCII kept as-is), UTF-8 encoded and encrypted with
AES-256-CBC under a fresh random key for every call.

Known weaknesses, kept for compatibility with existing consumers:
  - The IV is a constant 16 zero bytes. Identical plaintexts give identical
    ciphertext prefixes under the same key. It is only tolerable because a
    new key is generated per call; reusing keys would break confidentiality.
  - The key is returned alongside the ciphertext. Anyone who sees the
    response can decrypt it: confidentiality is NOT provided end-to-end.
  - CBC without a MAC gives no integrity protection.
New integrations should use an authenticated mode (e.g. AES-GCM) with a
unique nonce and keep keys out of the response.
"""

import json
import logging
import os
from typing import Any

from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from finrecord.errors import DecryptionError
from finrecord.models import EncryptedPayload

logger = logging.getLogger(__name__)

KEY_BYTES = 32  # AES-256
ZERO_IV = bytes(16)


def serialize_record(record: Any) -> str:
    """Serialize a JSON value compactly, matching JSON.stringify output."""
    return json.dumps(record, separators=(",", ":"), ensure_ascii=False)


def _cipher(key: bytes) -> Cipher:
    return Cipher(algorithms.AES(key), modes.CBC(ZERO_IV))


def encrypt_bytes(plaintext: bytes, key: bytes) -> bytes:
    padder = padding.PKCS7(algorithms.AES.block_size).padder()
    padded = padder.update(plaintext) + padder.finalize()
    encryptor = _cipher(key).encryptor()
    return encryptor.update(padded) + encryptor.finalize()


def encrypt_record(record: Any) -> EncryptedPayload:
    """Encrypt a JSON value under a newly generated key.

    Returns the hex-encoded ciphertext together with the hex-encoded key.
    """
    key = os.urandom(KEY_BYTES)
    plaintext = serialize_record(record).encode("utf-8")
    ciphertext = encrypt_bytes(plaintext, key)

    logger.info(f"Encrypted {len(plaintext)} bytes into {len(ciphertext)} bytes")
    return EncryptedPayload(encrypted_data=ciphertext.hex(), key=key.hex())


def decrypt_payload(encrypted_hex: str, key_hex: str) -> str:
    """Reverse encrypt_record: return the serialized record text.

    Raises DecryptionError for malformed hex, a key of the wrong size, or
    padding that does not check out (usually a wrong key).
    """
    try:
        ciphertext = bytes.fromhex(encrypted_hex)
        key = bytes.fromhex(key_hex)
    except ValueError as exc:
        raise DecryptionError("Ciphertext and key must be hex encoded") from exc

    if len(key) != KEY_BYTES:
        raise DecryptionError(f"Key must be {KEY_BYTES} bytes, got {len(key)}")
    if not ciphertext or len(ciphertext) % 16:
        raise DecryptionError("Ciphertext length is not a multiple of the block size")

    decryptor = _cipher(key).decryptor()
    padded = decryptor.update(ciphertext) + decryptor.finalize()
    unpadder = padding.PKCS7(algorithms.AES.block_size).unpadder()
    try:
        plaintext = unpadder.update(padded) + unpadder.finalize()
        return plaintext.decode("utf-8")
    except ValueError as exc:
        # UnicodeDecodeError is a ValueError too
        raise DecryptionError("Ciphertext could not be decrypted with this key") from exc
