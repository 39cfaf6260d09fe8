"""Integration tests for /daily logging routes."""
import pytest


class TestDailyRoutes:
    def test_read_empty_day(self, client):
        resp = client.get("/daily/today")
        assert resp.status_code == 200
        body = resp.json()
        assert body["steps"]["count"] == 0
        assert body["steps"]["goal"] == 10000
        assert body["nutrition"]["meals"] == []
        assert body["hydration"]["goal"] == 8
        assert body["activities"] == []

    def test_put_steps(self, client):
        body = client.put("/daily/steps", json={"count": 10000}).json()
        assert body["calories"] == 187
        assert body["distance"] == pytest.approx(7.05, abs=0.01)

    def test_negative_steps_rejected(self, client):
        resp = client.put("/daily/steps", json={"count": -1})
        assert resp.status_code == 422

    def test_log_sleep_derives_recovery(self, client):
        body = client.post("/daily/sleep", json={"duration": 7.5, "quality_choice": "great"}).json()
        assert body["quality"] == 90
        assert body["recovery_score"] == 69

    def test_recovery_score_not_accepted_from_client(self, client):
        body = client.post(
            "/daily/sleep",
            json={"duration": 7, "quality_choice": "poor", "recovery_score": 100},
        ).json()
        assert body["recovery_score"] == 49

    def test_add_meal(self, client):
        resp = client.post("/daily/meals", json={
            "name": "Oats", "meal_type": "breakfast", "calories": 350, "protein": 12,
        })
        assert resp.status_code == 200
        body = resp.json()
        assert body["totals"]["calories"] == 350
        assert [m["name"] for m in body["meals"]] == ["Oats"]

    def test_bad_meal_type_rejected(self, client):
        resp = client.post("/daily/meals", json={"name": "Cake", "meal_type": "brunch"})
        assert resp.status_code == 422

    def test_add_glass(self, client):
        client.post("/daily/hydration/glass")
        body = client.post("/daily/hydration/glass").json()
        assert body["glasses"] == 2
        assert body["ml"] == 500

    def test_day_reflects_logging(self, client):
        client.put("/daily/steps", json={"count": 4200})
        client.post("/daily/meals", json={"name": "Soup", "meal_type": "lunch", "calories": 300})
        body = client.get("/daily/today").json()
        assert body["steps"]["count"] == 4200
        assert body["nutrition"]["totals"]["calories"] == 300
        assert len(body["nutrition"]["meals"]) == 1

    def test_macro_score_on_target(self, client):
        body = client.post("/daily/meals", json={
            "name": "Day of food", "meal_type": "dinner", "calories": 2200, "protein": 130,
        }).json()
        assert body["macro_score"] == 94

    def test_macro_score_penalises_sugar(self, client):
        client.post("/daily/meals", json={
            "name": "Day of food", "meal_type": "dinner", "calories": 2200, "protein": 130,
        })
        body = client.post("/daily/meals", json={
            "name": "Sweets", "meal_type": "snack", "sugar": 100,
        }).json()
        assert body["totals"]["sugar"] == 100
        assert body["macro_score"] == 69

    def test_macro_score_on_day_view(self, client):
        body = client.get("/daily/today").json()
        # nothing eaten: only sugar compliance scores
        assert body["nutrition"]["macro_score"] == 25
