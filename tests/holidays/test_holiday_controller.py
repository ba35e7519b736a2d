from __future__ import annotations


def _status(client, employee, work_date):
    resp = client.get("/api/records", query_string={"employee": employee, "date": work_date})
    return resp.get_json()["records"][0]["status"]


def test_default_holidays_are_listed(client):
    resp = client.get("/api/holidays", query_string={"start": "2025-01-01", "end": "2025-02-28"})

    assert resp.status_code == 200
    assert resp.get_json()["holidays"] == [{"date": "2025-01-01", "name": "New Year's Day"}]


def test_adding_holiday_reclassifies_loaded_days(loaded_client):
    assert _status(loaded_client, "Dolly", "2025-01-02") == "Present"

    resp = loaded_client.post("/api/holidays", json={"date": "2025-01-02", "name": "Company Day"})

    assert resp.status_code == 201
    assert {"date": "2025-01-02", "name": "Company Day"} in resp.get_json()["holidays"]
    assert _status(loaded_client, "Dolly", "2025-01-02") == "Work on Holiday"
    assert _status(loaded_client, "Sam", "2025-01-02") == "Public Holiday"


def test_removing_holiday_keeps_manual_edits(loaded_client):
    loaded_client.patch("/api/records/Dolly/2025-01-01", json={"reason": "Travelling"})

    resp = loaded_client.delete("/api/holidays/2025-01-01")

    assert resp.status_code == 200
    assert _status(loaded_client, "Dolly", "2025-01-01") == "Absent"
    assert _status(loaded_client, "Sam", "2025-01-01") == "Half-day"
    record = loaded_client.get(
        "/api/records", query_string={"employee": "Dolly", "date": "2025-01-01"}
    ).get_json()["records"][0]
    assert record["reason"] == "Travelling"


def test_replace_whole_list(loaded_client):
    resp = loaded_client.put("/api/holidays", json={"holidays": [{"date": "2025-01-06", "name": "Epiphany"}]})

    assert resp.status_code == 200
    assert resp.get_json()["holidays"] == [{"date": "2025-01-06", "name": "Epiphany"}]
    assert _status(loaded_client, "Sam", "2025-01-06") == "Public Holiday"
    assert _status(loaded_client, "Sam", "2025-01-01") == "Half-day"


def test_holiday_validation_errors(client):
    assert client.post("/api/holidays", json={"date": "2025-01-01", "name": "Again"}).status_code == 400
    assert client.post("/api/holidays", json={"date": "2025-02-01", "name": ""}).status_code == 400
    assert client.post("/api/holidays", json={"date": "Feb 1", "name": "X"}).status_code == 400
    assert client.put("/api/holidays", json={"holidays": "nope"}).status_code == 400

    duplicate = [{"date": "2025-02-01", "name": "A"}, {"date": "2025-02-01", "name": "B"}]
    assert client.put("/api/holidays", json=duplicate).status_code == 400

    assert client.delete("/api/holidays/2025-02-01").status_code == 404
