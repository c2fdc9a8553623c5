from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.schemas.workout import WorkoutLog, WorkoutSet

NOW = datetime(2026, 10, 17, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


def make_log(
    exercise_id="bench",
    days_ago=0.0,
    weight=100.0,
    reps=8,
    muscle_groups=("pecho",),
    sets=None,
    now=NOW,
    log_id=None,
):
    """WorkoutLog with one top set (or the given sets), dated `days_ago` before `now`."""
    if sets is None:
        sets = [WorkoutSet(weight=weight, reps=reps, tempo="3-1-2")]
    return WorkoutLog(
        id=log_id or f"{exercise_id}-{days_ago}",
        date=now - timedelta(days=days_ago),
        exercise_id=exercise_id,
        exercise_name=exercise_id.title(),
        muscle_groups=list(muscle_groups),
        sets=sets,
        suggested_rest=120,
    )
