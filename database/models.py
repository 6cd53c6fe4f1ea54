"""
In-memory record models held by the stores.
"""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel

ADULT_AGE = 18


def is_adult(age: int) -> bool:
    return age >= ADULT_AGE


class UserProfile(BaseModel):
    id: int
    name: str
    email: str
    age: int
    role: str
    adult: bool


@dataclass
class Credential:
    """A registered identity. ``password_hash`` never leaves the server."""

    id: int
    email: str
    password_hash: str
