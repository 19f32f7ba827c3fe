# profile_api/api/profiles.py

from datetime import date
from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query

from profile_api.api.dependencies import get_today
from profile_api.models.profiles import BirthDateRequest, PhoneQuery, Profile
from profile_api.services.profiles import build_profile

router = APIRouter(prefix="/api2", tags=["api2"])


@router.post(
    "/hello/{name}",
    response_model=Profile,
    responses={400: {"description": "birth_date is malformed or out of range"}},
)
def hello(
    name: Annotated[str, Path(min_length=1, description="Person name")],
    body: BirthDateRequest,
    query: Annotated[PhoneQuery, Query()],
    today: Annotated[date, Depends(get_today)],
) -> Profile:
    """
    Build a profile from the name, the birth date and a comma-separated phone list.

    Age is floor(days since birth / 365).
    """
    return build_profile(
        name=name,
        birth_date=body.birth_date,
        phone_numbers=query.phone_numbers,
        today=today,
    )
