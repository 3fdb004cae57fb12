"""Throwaway endpoints for checking the request logger by hand."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from fastapi import APIRouter, Body
from fastapi.responses import PlainTextResponse

from reqlog.models.schemas import DeleteResponse, RedirectInfo, SubmitResponse, UpdateResponse

router = APIRouter(prefix="/test", tags=["test"])


@router.get("/hello", response_class=PlainTextResponse)
async def get_hello() -> str:
    return "Hello World!"


@router.post("/submit", response_model=SubmitResponse, status_code=201)
async def submit_data(body: Any = Body(default=None)) -> SubmitResponse:
    return SubmitResponse(
        message="Data submitted successfully",
        timestamp=datetime.now(timezone.utc),
        received_data=body,
    )


@router.get("/error")
async def get_error() -> None:
    raise RuntimeError("Test error for logging")


@router.get("/not-found")
async def get_not_found() -> None:
    # Same generic failure as /test/error, so this logs as a 500 and not a 404.
    raise RuntimeError("Resource not found")


@router.get("/redirect", response_model=RedirectInfo)
async def get_redirect() -> RedirectInfo:
    return RedirectInfo(redirect=True, destination="/test/hello")


@router.put("/update/{id}", response_model=UpdateResponse)
async def update_data(id: str, body: Any = Body(default=None)) -> UpdateResponse:
    return UpdateResponse(message="Data updated successfully", id=id, updated_data=body)


@router.delete("/delete/{id}", response_model=DeleteResponse)
async def delete_data(id: str) -> DeleteResponse:
    return DeleteResponse(message="Data deleted successfully", id=id)
