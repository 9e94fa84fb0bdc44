"""Request body parsing shared by the raw-JSON endpoints."""

import json
from typing import Any, NoReturn

from fastapi import Request

from finrecord.errors import MalformedBodyError


def _reject_constant(name: str) -> NoReturn:
    # NaN and Infinity are accepted by Python's json but are not JSON
    raise MalformedBodyError(f"Request body contains non-JSON constant '{name}'")


async def read_json_body(request: Request) -> Any:
    """Parse the request body as JSON; an empty body counts as ``{}``.

    Raises MalformedBodyError for unparseable bodies, the NaN/Infinity
    constants, and strings holding lone surrogates (which cannot be
    encoded as UTF-8 further down).
    """
    raw = await request.body()
    if not raw.strip():
        return {}
    try:
        data = json.loads(raw, parse_constant=_reject_constant)
    except ValueError as exc:
        raise MalformedBodyError("Request body is not valid JSON") from exc

    try:
        json.dumps(data, ensure_ascii=False).encode("utf-8")
    except UnicodeEncodeError as exc:
        raise MalformedBodyError("Request body contains invalid Unicode") from exc
    return data
