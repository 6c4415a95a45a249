from bistro_api.models import Timesheet


def _timesheets_url(employee_id):
    return f"/api/employees/{employee_id}/timesheets"

def _create(client, employee_id, **fields):
    payload = {"hours": 8, "rate": 15.5, "date": "2024-03-01"}
    payload.update(fields)
    return client.post(_timesheets_url(employee_id), json={"timesheet": payload})

def test_create_timesheet(client, employee):
    response = _create(client, employee["id"])
    assert response.status_code == 201
    assert response.json()["timesheet"] == {
        "id": 1,
        "hours": 8,
        "rate": 15.5,
        "date": "2024-03-01",
        "employee_id": employee["id"],
    }

def test_create_timesheets_on_same_date_returns_each_row(client, employee):
    first = _create(client, employee["id"], hours=4).json()["timesheet"]
    second = _create(client, employee["id"], hours=6).json()["timesheet"]
    assert first["id"] != second["id"]
    assert second["hours"] == 6

def test_create_timesheet_missing_fields(client, employee, db):
    response = client.post(_timesheets_url(employee["id"]), json={"timesheet": {"hours": 8, "rate": 10}})
    assert response.status_code == 400
    assert response.json() == {"error": "Missing required fields"}
    assert db.query(Timesheet).count() == 0

def test_create_timesheet_for_missing_employee(client):
    response = _create(client, 7)
    assert response.status_code == 404
    assert response.json() == {"error": "Employee not found"}

def test_list_timesheets_for_employee(client, employee):
    other = client.post(
        "/api/employees",
        json={"employee": {"name": "Bob", "position": "Waiter", "wage": 12}},
    ).json()["employee"]
    _create(client, employee["id"])
    _create(client, other["id"])

    response = client.get(_timesheets_url(employee["id"]))
    assert response.status_code == 200
    timesheets = response.json()["timesheets"]
    assert len(timesheets) == 1
    assert timesheets[0]["employee_id"] == employee["id"]

def test_update_timesheet(client, employee):
    timesheet = _create(client, employee["id"]).json()["timesheet"]
    response = client.put(
        f"{_timesheets_url(employee['id'])}/{timesheet['id']}",
        json={"timesheet": {"hours": 5, "rate": 20, "date": "2024-03-02"}},
    )
    assert response.status_code == 200
    updated = response.json()["timesheet"]
    assert updated["id"] == timesheet["id"]
    assert updated["hours"] == 5
    assert updated["date"] == "2024-03-02"

def test_update_timesheet_missing_field_leaves_row_unchanged(client, employee):
    timesheet = _create(client, employee["id"]).json()["timesheet"]
    response = client.put(
        f"{_timesheets_url(employee['id'])}/{timesheet['id']}",
        json={"timesheet": {"hours": 5, "date": "2024-03-02"}},
    )
    assert response.status_code == 400
    assert client.get(_timesheets_url(employee["id"])).json()["timesheets"] == [timesheet]

def test_update_missing_timesheet(client, employee):
    response = client.put(
        f"{_timesheets_url(employee['id'])}/99",
        json={"timesheet": {"hours": 5, "rate": 20, "date": "2024-03-02"}},
    )
    assert response.status_code == 404
    assert response.json() == {"error": "Timesheet not found"}

def test_timesheet_under_other_employee_is_not_found(client, employee):
    other = client.post(
        "/api/employees",
        json={"employee": {"name": "Bob", "position": "Waiter", "wage": 12}},
    ).json()["employee"]
    timesheet = _create(client, employee["id"]).json()["timesheet"]

    response = client.delete(f"{_timesheets_url(other['id'])}/{timesheet['id']}")
    assert response.status_code == 404
    assert len(client.get(_timesheets_url(employee["id"])).json()["timesheets"]) == 1

def test_delete_timesheet(client, employee):
    timesheet = _create(client, employee["id"]).json()["timesheet"]
    response = client.delete(f"{_timesheets_url(employee['id'])}/{timesheet['id']}")
    assert response.status_code == 204
    assert response.content == b""
    assert client.get(_timesheets_url(employee["id"])).json() == {"timesheets": []}

def test_timesheet_id_beyond_integer_range(client, employee):
    response = client.delete(f"{_timesheets_url(employee['id'])}/99999999999999999999")
    assert response.status_code == 404
    assert response.json() == {"error": "Timesheet not found"}

def test_timesheet_id_with_sign_is_not_found(client, employee):
    timesheet = _create(client, employee["id"]).json()["timesheet"]
    response = client.delete(f"{_timesheets_url(employee['id'])}/+{timesheet['id']}")
    assert response.status_code == 404
    assert response.json() == {"error": "Timesheet not found"}
