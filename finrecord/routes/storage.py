"""Flat-file store and retrieve endpoints."""

from fastapi import APIRouter, Request
from fastapi.responses import Response
from fastapi.concurrency import run_in_threadpool

from finrecord.models import RetrieveRequest, StoreResponse
from finrecord.routes.body import read_json_body
from finrecord.storage.filestore import FileStore

router = APIRouter(prefix="/api")


def _get_store(request: Request) -> FileStore:
    """Retrieve the file store from application state."""
    return request.app.state.store


@router.post("/store", response_model=StoreResponse)
async def store_data(request: Request) -> StoreResponse:
    """Persist the JSON body, overwriting the previous blob."""
    data = await read_json_body(request)
    file_path = await run_in_threadpool(_get_store(request).store, data)
    return StoreResponse(message="Data stored successfully", file_path=file_path)


@router.post(
    "/retrieve",
    response_class=Response,
    responses={
        200: {"content": {"application/json": {}}},
        400: {"description": "Unsafe file path"},
        404: {"description": "File not found"},
    },
)
async def retrieve_data(payload: RetrieveRequest, request: Request) -> Response:
    """Return the stored file's text exactly as it was written."""
    content = await run_in_threadpool(_get_store(request).retrieve, payload.file_path)
    return Response(content=content, media_type="application/json")
