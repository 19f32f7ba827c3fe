# profile_api/api/dependencies.py

from datetime import date, datetime
from zoneinfo import ZoneInfo

from fastapi import Request

from profile_api.core.config import Settings


def get_today(request: Request) -> date:
    """
    Current calendar date in the time zone of the running application.
    """
    settings: Settings = request.app.state.settings
    return datetime.now(ZoneInfo(settings.timezone)).date()
