"""Schema validation endpoint."""

from typing import Union

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from finrecord.models import ValidationSuccess
from finrecord.processing.validator import validate_record
from finrecord.routes.body import read_json_body

router = APIRouter(prefix="/api")


@router.post(
    "/validate",
    response_model=ValidationSuccess,
    responses={400: {"description": "Record does not match the transaction schema"}},
)
async def validate_transaction(request: Request) -> Union[ValidationSuccess, JSONResponse]:
    """Validate a transaction record against the structural schema.

    Always answers with a structured result: 200 when the record conforms,
    400 with every violation found otherwise.
    """
    data = await read_json_body(request)
    report = validate_record(data)

    if not report.valid:
        return JSONResponse(
            status_code=400,
            content={
                "error": "Invalid data format",
                "details": [issue.model_dump() for issue in report.issues],
            },
        )

    return ValidationSuccess(message="Data validated successfully")
