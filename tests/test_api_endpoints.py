"""Integration tests for API endpoints.

These tests verify API endpoints work correctly end-to-end.
"""


class TestHealthAndConfig:

    def test_health(self, test_client):
        response = test_client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok"}

    def test_config_uses_camel_case(self, test_client):
        response = test_client.get("/config")
        assert response.status_code == 200
        assert response.json() == {
            "cycleStartDate": "2026-01-01",
            "workWeeks": 6,
            "restWeeks": 1,
            "weekStartsOn": 1,
        }

    def test_config_overrides(self, test_client):
        response = test_client.get("/config", params={"work_weeks": 3, "week_starts_on": 0})
        assert response.status_code == 200
        data = response.json()
        assert data["workWeeks"] == 3
        assert data["weekStartsOn"] == 0

    def test_invalid_week_start_rejected(self, test_client):
        response = test_client.get("/config", params={"week_starts_on": 3})
        assert response.status_code == 422


class TestBlockEndpoints:
    """Test GET /blocks and GET /blocks/lookup."""

    def test_list_blocks(self, test_client):
        response = test_client.get("/blocks", params={"year": 2026})
        assert response.status_code == 200
        data = response.json()
        assert data["year"] == 2026
        assert data["total_cycles"] == 8
        assert len(data["blocks"]) == 53
        assert data["blocks"][0] == {
            "type": "work",
            "cycleNumber": 1,
            "weekInCycle": 1,
            "start": "2026-01-01",
            "end": "2026-01-05",
        }

    def test_filter_by_type(self, test_client):
        response = test_client.get("/blocks", params={"year": 2026, "type": "rest"})
        assert response.status_code == 200
        data = response.json()
        assert len(data["blocks"]) == 7
        assert all(b["type"] == "rest" for b in data["blocks"])
        # Total counts the unfiltered year
        assert data["total_cycles"] == 8

    def test_filter_by_cycle(self, test_client):
        response = test_client.get("/blocks", params={"year": 2026, "cycle": 1})
        assert response.status_code == 200
        assert [b["weekInCycle"] for b in response.json()["blocks"]] == [1, 2, 3, 4, 5, 6, 7]

    def test_invalid_type_rejected(self, test_client):
        response = test_client.get("/blocks", params={"type": "holiday"})
        assert response.status_code == 422

    def test_invalid_configuration_is_400(self, test_client):
        response = test_client.get("/blocks", params={"year": 2026, "rest_weeks": 0})
        assert response.status_code == 400
        assert "rest_weeks" in response.json()["detail"]

    def test_oversized_cycle_is_400(self, test_client):
        response = test_client.get(
            "/blocks", params={"year": 2026, "start": "2027-06-01", "work_weeks": 150000}
        )
        assert response.status_code == 400
        assert "date range" in response.json()["detail"]

    def test_start_override(self, test_client):
        response = test_client.get("/blocks", params={"year": 2026, "start": "2026-03-01"})
        assert response.status_code == 200
        first = response.json()["blocks"][0]
        assert first["type"] == "rest"
        assert first["weekInCycle"] == 7

    def test_lookup(self, test_client):
        response = test_client.get("/blocks/lookup", params={"date": "2026-01-15"})
        assert response.status_code == 200
        block = response.json()
        assert block["start"] == "2026-01-12"
        assert block["end"] == "2026-01-19"
        assert block["type"] == "work"

    def test_lookup_uses_year_of_date(self, test_client):
        response = test_client.get("/blocks/lookup", params={"date": "2027-02-01"})
        assert response.status_code == 200
        assert response.json()["start"] == "2027-02-01"

    def test_lookup_bad_date(self, test_client):
        response = test_client.get("/blocks/lookup", params={"date": "not-a-date"})
        assert response.status_code == 422


class TestCycleEndpoints:
    """Test cycle summaries and naming."""

    def test_list_cycles(self, test_client):
        response = test_client.get("/cycles", params={"year": 2026})
        assert response.status_code == 200
        cycles = response.json()
        assert [c["cycle_number"] for c in cycles] == list(range(1, 9))
        assert cycles[0]["display_name"] == "Cycle 1"
        assert cycles[0]["rest_start"] == "2026-02-09"

    def test_get_unnamed_cycle(self, test_client):
        response = test_client.get("/cycles/2026/1/name")
        assert response.status_code == 200
        assert response.json() == {"cycle_number": 1, "name": None}

    def test_set_name_and_list(self, test_client):
        response = test_client.put("/cycles/2026/2/name", json={"name": "  Spring sprint "})
        assert response.status_code == 200
        assert response.json() == {"cycle_number": 2, "name": "Spring sprint"}

        assert test_client.get("/cycles/2026/2/name").json()["name"] == "Spring sprint"
        cycles = test_client.get("/cycles", params={"year": 2026}).json()
        assert cycles[1]["name"] == "Spring sprint"
        assert cycles[1]["display_name"] == "Spring sprint"

    def test_names_scoped_by_year(self, test_client):
        test_client.put("/cycles/2026/1/name", json={"name": "Kickoff"})
        assert test_client.get("/cycles/2027/1/name").json()["name"] is None

    def test_blank_name_clears(self, test_client):
        test_client.put("/cycles/2026/3/name", json={"name": "Temp"})
        response = test_client.put("/cycles/2026/3/name", json={"name": ""})
        assert response.status_code == 200
        assert response.json()["name"] is None

    def test_invalid_cycle_number(self, test_client):
        response = test_client.put("/cycles/2026/0/name", json={"name": "Nope"})
        assert response.status_code == 400

    def test_get_invalid_cycle_number(self, test_client):
        response = test_client.get("/cycles/2026/0/name")
        assert response.status_code == 400


class TestViewEndpoints:

    def test_timeline(self, test_client):
        response = test_client.get("/views/timeline", params={"year": 2026, "today": "2026-03-01"})
        assert response.status_code == 200
        data = response.json()
        assert data["current_cycle"] == 2
        assert len(data["cycles"]) == 8
        assert data["months"][0] == {"month": 1, "start_index": 0, "width": 5}

    def test_month(self, test_client):
        response = test_client.get("/views/month", params={"year": 2026, "month": 2})
        assert response.status_code == 200
        data = response.json()
        assert data["cycles"] == [1, 2]
        assert len(data["weeks"]) == 5
        assert data["weeks"][0][0]["day"] == "2026-01-26"

    def test_month_out_of_range(self, test_client):
        response = test_client.get("/views/month", params={"year": 2026, "month": 13})
        assert response.status_code == 422

    def test_agenda(self, test_client):
        test_client.put("/cycles/2026/1/name", json={"name": "Kickoff"})
        response = test_client.get("/views/agenda", params={"year": 2026, "today": "2026-01-15"})
        assert response.status_code == 200
        entries = response.json()
        assert len(entries) == 53
        assert entries[0]["last_day"] == "2026-01-04"
        assert entries[0]["cycle_name"] == "Kickoff"
        current = [e for e in entries if e["is_current"]]
        assert len(current) == 1
        assert current[0]["block"]["start"] == "2026-01-12"
