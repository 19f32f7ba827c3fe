# profile_api/api/greeting.py

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

GREETING = "hello from api 1"

router = APIRouter(prefix="/api1", tags=["api1"])


@router.get(
    "/hello",
    response_class=PlainTextResponse,
    responses={200: {"description": "Hello from api 1"}},
)
def hello() -> str:
    return GREETING
