from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class SubmitResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    message: str
    timestamp: datetime
    received_data: Any = Field(default=None, alias="receivedData")


class RedirectInfo(BaseModel):
    redirect: bool
    destination: str


class UpdateResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    message: str
    id: str
    updated_data: Any = Field(default=None, alias="updatedData")


class DeleteResponse(BaseModel):
    message: str
    id: str
