import logging
from datetime import datetime, timezone

from fastapi.testclient import TestClient

from conftest import make_log

from app.main import create_application

API = "/api/v1"

PROFILE = {
    "weight": 80,
    "height": 178,
    "age": 31,
    "sex": "male",
    "activityLevel": "moderate",
    "goal": "maintain",
}


def dump(*logs):
    return [log.model_dump(mode="json", by_alias=True) for log in logs]


def recent(days_ago, **kwargs):
    # Endpoints measure against the wall clock
    return make_log(days_ago=days_ago, now=datetime.now(timezone.utc), **kwargs)


# ── Root and health ──────────────────────────────────────────────────────

def test_root(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "message": "Fitness Tracker API"}


def test_health(client):
    response = client.get(f"{API}/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_health_includes_build_time(client, monkeypatch):
    monkeypatch.setenv("BACKEND_BUILT_AT", "2026-10-01T10:00:00Z")
    assert client.get(f"{API}/health").json()["built_at"] == "2026-10-01T10:00:00Z"


def test_unexpected_error_returns_generic_500():
    app = create_application()

    @app.get("/boom")
    def boom():
        raise RuntimeError("database on fire")

    with TestClient(app, raise_server_exceptions=False) as c:
        response = c.get("/boom")
    assert response.status_code == 500
    assert response.json() == {"detail": "Internal server error"}


# ── Nutrition ────────────────────────────────────────────────────────────

def test_macro_target_has_exactly_four_fields(client):
    response = client.post(f"{API}/nutrition/macros/target", json=PROFILE)
    assert response.status_code == 200
    assert response.json() == {"calories": 2732, "protein": 160, "carbs": 332, "fat": 85}


def test_macro_breakdown_in_english(client):
    response = client.post(f"{API}/nutrition/macros?language=en", json=PROFILE)
    assert response.status_code == 200
    data = response.json()
    assert data["bmr"] == 1762.5
    assert data["tdee"] == 2732
    assert data["targetCalories"] == 2732
    assert data["proteinKcal"] == 640
    assert data["fatKcal"] == 765
    assert data["activityLabel"] == "Moderate (3-5 days/week)"
    assert data["goalLabel"] == "Maintain"


def test_macro_breakdown_defaults_to_spanish(client):
    data = client.post(f"{API}/nutrition/macros", json=PROFILE).json()
    assert data["goalLabel"] == "Mantener"


def test_invalid_profile_is_rejected(client):
    for field, value in (("weight", 0), ("height", -170), ("age", 0), ("goal", "bulk")):
        response = client.post(f"{API}/nutrition/macros/target", json={**PROFILE, field: value})
        assert response.status_code == 422, field


def test_meal_plan_summary_from_profile(client):
    payload = {
        "profile": PROFILE,
        "days": [
            {
                "day": "lunes",
                "meals": [
                    {"id": "m1", "name": "Oats", "type": "breakfast", "protein": 30, "carbs": 50, "fat": 10},
                    {"id": "m2", "name": "Chicken", "type": "lunch", "calories": 956, "protein": 80},
                ],
            }
        ],
    }
    data = client.post(f"{API}/nutrition/meal-plan/summary", json=payload).json()
    assert data["target"]["calories"] == 2732
    assert len(data["days"]) == 7
    monday = data["days"][0]
    assert monday["dayLabel"] == "LUN"
    assert monday["totals"]["calories"] == 1366
    assert monday["calorieProgress"] == 50
    assert monday["proteinProgress"] == 68.75


def test_meal_plan_summary_without_target(client):
    data = client.post(f"{API}/nutrition/meal-plan/summary", json={"days": []}).json()
    assert data["target"] is None
    assert all(day["calorieProgress"] == 0 for day in data["days"])


def test_meal_calories(client):
    response = client.post(f"{API}/nutrition/meal-calories", json={"protein": 30, "carbs": 50, "fat": 10})
    assert response.json() == {"calories": 410}


# ── Progression ──────────────────────────────────────────────────────────

def test_ego_check_fine_omits_message(client):
    payload = {"exerciseId": "bench", "currentWeight": 105, "history": dump(recent(1), recent(8, weight=95))}
    response = client.post(f"{API}/progression/ego-check", json=payload)
    assert response.status_code == 200
    assert response.json() == {"isEgo": False}


def test_ego_check_flags_jump(client):
    payload = {"exerciseId": "bench", "currentWeight": 115, "history": dump(recent(1), recent(8, weight=95))}
    data = client.post(f"{API}/progression/ego-check?language=en", json=payload).json()
    assert data == {"isEgo": True, "message": "15.0% increase detected. Risk of ego lifting."}


def test_stagnation(client):
    payload = {"exerciseId": "bench", "history": dump(*(recent(d, weight=80) for d in (1, 8, 15)))}
    assert client.post(f"{API}/progression/stagnation", json=payload).json() == {
        "isStagnant": True,
        "weeks": 3,
    }


def test_alerts(client):
    payload = {
        "exerciseId": "bench",
        "currentWeight": 120,
        "history": dump(*(recent(d, weight=100) for d in (1, 8, 15))),
    }
    alerts = client.post(f"{API}/progression/alerts", json=payload).json()
    assert [a["type"] for a in alerts] == ["ego", "stagnation"]
    assert alerts[1]["message"].startswith("3 semanas")
    assert alerts[0]["exerciseId"] == "bench"


def test_last_stimulus(client):
    payload = {"muscleGroup": "pecho", "history": dump(recent(5.5))}
    data = client.post(f"{API}/progression/last-stimulus?language=en", json=payload).json()
    assert data == {"muscleGroup": "pecho", "label": "Chest", "days": 5, "status": "yellow"}


def test_last_stimulus_never_trained(client):
    data = client.post(f"{API}/progression/last-stimulus", json={"muscleGroup": "gluteos"}).json()
    assert data["days"] == 999
    assert data["status"] == "red"


def test_recovery_overview(client):
    data = client.post(f"{API}/progression/recovery", json={"history": dump(recent(1))}).json()
    assert [d["muscleGroup"] for d in data] == ["pecho", "espalda", "piernas", "hombros"]
    assert data[0]["status"] == "green"

    picked = client.post(
        f"{API}/progression/recovery", json={"history": [], "muscleGroups": ["core"]}
    ).json()
    assert [d["muscleGroup"] for d in picked] == ["core"]


def test_unknown_muscle_group_is_rejected(client):
    response = client.post(f"{API}/progression/last-stimulus", json={"muscleGroup": "neck"})
    assert response.status_code == 422


# ── Progress analytics ───────────────────────────────────────────────────

def test_exercise_progress_with_range(client):
    payload = {
        "history": dump(recent(2, weight=90), recent(9, weight=85), recent(60, weight=70)),
        "range": {"type": "30d"},
    }
    (series,) = client.post(f"{API}/progress/exercises", json=payload).json()
    assert [p["weight"] for p in series["points"]] == [85, 90]
    assert series["trend"] == "up"


def test_inverted_custom_range_is_bad_request(client):
    payload = {"history": [], "range": {"type": "custom", "start": "2026-10-10", "end": "2026-10-01"}}
    response = client.post(f"{API}/progress/volume", json=payload)
    assert response.status_code == 400


def test_weekly_summary(client):
    history = dump(*(recent(d, weight=50, reps=10) for d in (1, 6, 10, 40)))
    data = client.post(f"{API}/progress/summary", json={"history": history}).json()
    assert data == {"weeklyWorkouts": 2, "weeklyVolume": 1000, "monthlySessions": 3}


def test_volume(client):
    data = client.post(f"{API}/progress/volume", json={"history": dump(recent(1, weight=100, reps=5))}).json()
    assert data == {"totalSets": 1, "totalVolume": 500}


def test_body_weight(client):
    payload = {
        "logs": [
            {"id": "a", "date": "2026-09-01T08:00:00Z", "weight": 80},
            {"id": "b", "date": "2026-09-15T08:00:00Z", "weight": 79},
        ]
    }
    data = client.post(f"{API}/progress/body-weight", json=payload).json()
    assert data["change"] == -1
    assert data["percentChange"] == -1.25
    assert data["trend"] == "down"
    assert data["entries"] == 2


# ── Tools ────────────────────────────────────────────────────────────────

def test_labels_in_english(client):
    data = client.get(f"{API}/tools/labels?language=en").json()
    assert data["language"] == "en"
    assert data["days"]["miercoles"] == "WED"
    assert data["muscleGroups"]["descanso"] == "Rest"
    assert data["goals"]["gain"] == "Gain muscle"


def test_unsupported_language_is_rejected(client):
    assert client.get(f"{API}/tools/labels?language=fr").status_code == 422


def test_rest_timer(client):
    assert client.get(f"{API}/tools/rest-timer?seconds=90").json() == {"seconds": 90, "display": "1:30"}
    assert client.get(f"{API}/tools/rest-timer?seconds=5").json()["display"] == "0:05"
    assert client.get(f"{API}/tools/rest-timer?seconds=-1").status_code == 422


def test_huge_weight_is_rejected_not_a_server_error(client):
    response = client.post(f"{API}/nutrition/macros/target", json={**PROFILE, "weight": 1e308})
    assert response.status_code == 422


def test_recovery_with_empty_group_list(client):
    response = client.post(f"{API}/progression/recovery", json={"history": [], "muscleGroups": []})
    assert response.status_code == 200
    assert response.json() == []


def test_alerts_are_logged(client, caplog):
    app_logger = logging.getLogger("app")
    app_logger.addHandler(caplog.handler)
    payload = {
        "exerciseId": "bench",
        "currentWeight": 120,
        "history": dump(*(recent(d, weight=100) for d in (1, 8, 15))),
    }
    try:
        with caplog.at_level(logging.INFO, logger="app"):
            client.post(f"{API}/progression/alerts", json=payload)
    finally:
        app_logger.removeHandler(caplog.handler)
    messages = [record.getMessage() for record in caplog.records]
    assert any("Anti-ego alert (ego) for exercise bench" in m for m in messages)
    assert any("Anti-ego alert (stagnation) for exercise bench" in m for m in messages)
