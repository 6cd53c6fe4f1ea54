"""
Pydantic schemas for request/response bodies of the HTTP API.
"""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class FieldError(BaseModel):
    msg: str
    param: str
    location: str = "body"


class ErrorsResponse(BaseModel):
    errors: List[FieldError]


class MessageResponse(BaseModel):
    message: str


class TokenResponse(BaseModel):
    token: str


class NextIdResponse(BaseModel):
    next_id: int = Field(..., alias="next-id")

    model_config = ConfigDict(populate_by_name=True)


# Documentation examples for the free-form JSON bodies.  The handlers
# validate these bodies themselves (see ``utils.validators``).

USER_CREATE_EXAMPLE = {
    "name": "Alice Johnson",
    "email": "alice@example.com",
    "age": 18,
    "role": "admin",
}

USER_UPDATE_EXAMPLE = {
    "name": "John Doe",
    "email": "john@example.com",
    "age": 30,
    "role": "user",
}

CREDENTIALS_EXAMPLE = {
    "email": "user@example.com",
    "password": "securepassword123",
}
