# profile_api/models/profiles.py

from typing import List

from pydantic import BaseModel, Field

MAX_AGE = 255


class Profile(BaseModel):
    name: str
    age: int = Field(..., ge=0, le=MAX_AGE)
    phones: List[str]


class BirthDateRequest(BaseModel):
    birth_date: str = Field(
        ...,
        description="Birth date in YYYY-MM-DD format",
        examples=["1990-01-01"],
    )


class PhoneQuery(BaseModel):
    phone_numbers: str = Field(
        ...,
        description="Comma-separated phone numbers, kept in order and unmodified",
        examples=["111-2222,333-4444"],
    )
