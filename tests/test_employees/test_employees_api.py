"""Tests for the employee directory API."""

from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from app.db.models import Employee


class TestListEmployees:
    """Tests for GET /api/employees."""

    def test_empty(self, client: TestClient):
        response = client.get("/api/employees")
        assert response.status_code == 200
        assert response.json() == []

    def test_ordered_by_name(self, client: TestClient, avery, jordan, riley):
        names = [e["name"] for e in client.get("/api/employees").json()]
        assert names == ["Avery Cole", "Jordan Blake", "Riley Quinn"]

    def test_search_case_insensitive(self, client: TestClient, avery, jordan, riley):
        response = client.get("/api/employees", params={"q": "  QUINN "})
        assert [e["employee_number"] for e in response.json()] == ["000125"]

    def test_search_wildcards_are_literal(self, client: TestClient, avery, make_employee):
        make_employee("Test_User", "000900")
        response = client.get("/api/employees", params={"q": "_"})
        assert [e["name"] for e in response.json()] == ["Test_User"]

    def test_status_filter(self, client: TestClient, avery, make_employee):
        make_employee("Former Person", "000999", active=False)

        active = client.get("/api/employees").json()
        inactive = client.get("/api/employees", params={"status": "inactive"}).json()
        everyone = client.get("/api/employees", params={"status": "all"}).json()

        assert [e["name"] for e in active] == ["Avery Cole"]
        assert [e["name"] for e in inactive] == ["Former Person"]
        assert len(everyone) == 2

    def test_invalid_status(self, client: TestClient):
        assert client.get("/api/employees", params={"status": "gone"}).status_code == 422


class TestCreateEmployee:
    """Tests for POST /api/employees."""

    def test_create(self, client: TestClient, db: Session):
        response = client.post(
            "/api/employees",
            json={"name": "  Sam Lee ", "employee_number": " 000200 "},
        )
        assert response.status_code == 201
        data = response.json()
        assert data["name"] == "Sam Lee"
        assert data["employee_number"] == "000200"
        assert data["active"] is True
        assert db.query(Employee).count() == 1

    def test_duplicate_number_conflict(self, client: TestClient, avery):
        response = client.post(
            "/api/employees",
            json={"name": "Someone Else", "employee_number": "000123"},
        )
        assert response.status_code == 409
        assert response.json()["detail"] == "Employee number must be unique."

    def test_non_digit_number_rejected(self, client: TestClient):
        response = client.post("/api/employees", json={"name": "A B", "employee_number": "12a"})
        assert response.status_code == 422

    def test_blank_name_rejected(self, client: TestClient):
        response = client.post("/api/employees", json={"name": "   ", "employee_number": "1"})
        assert response.status_code == 422

    def test_long_values_rejected(self, client: TestClient):
        response = client.post(
            "/api/employees",
            json={"name": "x" * 121, "employee_number": "1"},
        )
        assert response.status_code == 422
        response = client.post(
            "/api/employees",
            json={"name": "Ok", "employee_number": "1" * 33},
        )
        assert response.status_code == 422


class TestEmployeeDetail:
    """Tests for get, update, deactivate and activate."""

    def test_get(self, client: TestClient, avery):
        response = client.get(f"/api/employees/{avery.id}")
        assert response.status_code == 200
        assert response.json()["name"] == "Avery Cole"

    def test_get_missing(self, client: TestClient, db):
        response = client.get("/api/employees/missing")
        assert response.status_code == 404
        assert response.json()["detail"] == "Employee not found."

    def test_update(self, client: TestClient, avery):
        response = client.patch(
            f"/api/employees/{avery.id}",
            json={"name": "Avery J. Cole", "employee_number": "000321"},
        )
        assert response.status_code == 200
        assert response.json()["employee_number"] == "000321"

    def test_update_keeping_own_number(self, client: TestClient, avery):
        response = client.patch(
            f"/api/employees/{avery.id}",
            json={"name": "Avery Cole-Smith", "employee_number": "000123"},
        )
        assert response.status_code == 200

    def test_update_to_taken_number(self, client: TestClient, avery, jordan):
        response = client.patch(
            f"/api/employees/{avery.id}",
            json={"name": "Avery Cole", "employee_number": jordan.employee_number},
        )
        assert response.status_code == 409

    def test_update_missing(self, client: TestClient, db):
        response = client.patch(
            "/api/employees/missing",
            json={"name": "Nobody", "employee_number": "1"},
        )
        assert response.status_code == 404

    def test_deactivate_and_activate(self, client: TestClient, avery):
        response = client.delete(f"/api/employees/{avery.id}")
        assert response.status_code == 200
        assert response.json()["active"] is False
        assert client.get("/api/employees").json() == []

        response = client.patch(f"/api/employees/{avery.id}/activate")
        assert response.status_code == 200
        assert response.json()["active"] is True

    def test_deactivate_missing(self, client: TestClient, db):
        assert client.delete("/api/employees/missing").status_code == 404
        assert client.patch("/api/employees/missing/activate").status_code == 404
