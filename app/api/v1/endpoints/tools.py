"""QoL tools: localized labels, rest timer display."""

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel

from app.api.deps import get_language
from app.core.enums import Language
from app.core.labels import all_labels, format_time

router = APIRouter()


class RestTimerResponse(BaseModel):
    seconds: int
    display: str  # m:ss


@router.get("/labels")
async def labels(language: Language = Depends(get_language)):
    """
    Display labels for activity levels, goals, meal types, days and muscle groups.
    Keys are the wire values (e.g. "very_active", "pecho").
    """
    return {"language": language.value, **all_labels(language)}


@router.get("/rest-timer", response_model=RestTimerResponse)
async def rest_timer(seconds: int = Query(..., ge=0, description="Rest duration in seconds")):
    """Format a rest duration for the timer, e.g. 90 -> 1:30."""
    return RestTimerResponse(seconds=seconds, display=format_time(seconds))
