"""Record encryption endpoint."""

from fastapi import APIRouter, Request

from finrecord.models import EncryptedPayload
from finrecord.processing.encryptor import encrypt_record
from finrecord.routes.body import read_json_body

router = APIRouter(prefix="/api")


@router.post("/encrypt", response_model=EncryptedPayload)
async def encrypt_transaction(request: Request) -> EncryptedPayload:
    """Encrypt an arbitrary JSON body under a fresh AES-256 key.

    The key is returned in the same response as the ciphertext, so this
    endpoint gives no confidentiality against whoever reads the response.
    """
    data = await read_json_body(request)
    return encrypt_record(data)
