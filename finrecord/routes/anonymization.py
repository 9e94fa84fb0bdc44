"""Pseudonymization endpoint."""

from typing import Any, Dict

from fastapi import APIRouter, Request

from finrecord.processing.anonymizer import anonymize_record
from finrecord.routes.body import read_json_body

router = APIRouter(prefix="/api")


@router.post("/anonymize")
async def anonymize_transaction(request: Request) -> Dict[str, Any]:
    """Return the record with its personal fields replaced by pseudonyms."""
    data = await read_json_body(request)
    return anonymize_record(data)
