"""API tests for /api/hostels."""

import pytest
from fastapi.testclient import TestClient

MISSING_ID = "00000000-0000-0000-0000-000000000000"


def _create(client: TestClient, **overrides) -> dict:
    payload = {"name": "North Wing", "address": "1 College Road", "gender": "male", "capacity": 40}
    payload.update(overrides)
    response = client.post("/api/hostels", json=payload)
    assert response.status_code == 201, response.text
    return response.json()


class TestCreate:
    def test_create_returns_hostel(self, client: TestClient) -> None:
        hostel = _create(client)

        assert hostel["id"]
        assert hostel["name"] == "North Wing"
        assert hostel["gender"] == "male"
        assert hostel["capacity"] == 40

    def test_gender_defaults_to_mixed(self, client: TestClient) -> None:
        response = client.post("/api/hostels", json={"name": "South", "address": "2 Road", "capacity": 5})
        assert response.json()["gender"] == "mixed"

    def test_duplicate_name_rejected(self, client: TestClient) -> None:
        _create(client)

        response = client.post(
            "/api/hostels",
            json={"name": "North Wing", "address": "elsewhere", "capacity": 1},
        )

        assert response.status_code == 400
        assert response.json()["errors"] == {"field": "name"}

    def test_invalid_payload_rejected(self, client: TestClient) -> None:
        response = client.post("/api/hostels", json={"name": "", "address": "x", "capacity": -1})
        assert response.status_code == 422


class TestRead:
    def test_list_sorted_by_name(self, client: TestClient) -> None:
        _create(client, name="Zeta")
        _create(client, name="Alpha")

        names = [h["name"] for h in client.get("/api/hostels").json()]

        assert names == ["Alpha", "Zeta"]

    def test_get_by_id(self, client: TestClient) -> None:
        created = _create(client)
        fetched = client.get(f"/api/hostels/{created['id']}").json()

        assert fetched["id"] == created["id"]
        assert fetched["name"] == created["name"]
        assert fetched["address"] == created["address"]

    def test_get_missing(self, client: TestClient) -> None:
        assert client.get(f"/api/hostels/{MISSING_ID}").status_code == 404

    def test_get_malformed_id_is_not_found(self, client: TestClient) -> None:
        assert client.get("/api/hostels/not-a-uuid").status_code == 404


class TestUpdate:
    def test_partial_update(self, client: TestClient) -> None:
        created = _create(client)

        response = client.put(f"/api/hostels/{created['id']}", json={"capacity": 60})

        assert response.status_code == 200
        body = response.json()
        assert body["capacity"] == 60
        assert body["name"] == "North Wing"

    def test_rename_to_taken_name_rejected(self, client: TestClient) -> None:
        _create(client, name="Alpha")
        beta = _create(client, name="Beta")

        response = client.put(f"/api/hostels/{beta['id']}", json={"name": "Alpha"})

        assert response.status_code == 400

    def test_update_missing(self, client: TestClient) -> None:
        assert client.put(f"/api/hostels/{MISSING_ID}", json={"capacity": 1}).status_code == 404


class TestDelete:
    def test_delete(self, client: TestClient) -> None:
        created = _create(client)

        assert client.delete(f"/api/hostels/{created['id']}").status_code == 204
        assert client.get(f"/api/hostels/{created['id']}").status_code == 404

    def test_delete_missing(self, client: TestClient) -> None:
        assert client.delete(f"/api/hostels/{MISSING_ID}").status_code == 404

    def test_delete_cascades_to_rooms_and_allocations(self, client: TestClient) -> None:
        hostel = _create(client)
        room = client.post(
            "/api/rooms",
            json={"hostel_id": hostel["id"], "room_number": "101", "capacity": 2},
        ).json()
        allocation = client.post(
            "/api/hostel-students",
            json={"room_id": room["id"], "student_id": "S-1", "full_name": "Ada Lovelace"},
        ).json()

        assert client.delete(f"/api/hostels/{hostel['id']}").status_code == 204

        assert client.get(f"/api/rooms/{room['id']}").status_code == 404
        assert client.get(f"/api/hostel-students/{allocation['id']}").status_code == 404


class TestWhitespaceInput:
    @pytest.mark.parametrize("field", ["name", "address"])
    def test_blank_field_rejected_on_create(self, client: TestClient, field: str) -> None:
        payload = {"name": "North", "address": "1 Road", "capacity": 4}
        payload[field] = "   "

        response = client.post("/api/hostels", json=payload)

        assert response.status_code == 422
        assert client.get("/api/hostels").json() == []

    def test_blank_name_rejected_on_update(self, client: TestClient) -> None:
        created = _create(client)

        response = client.put(f"/api/hostels/{created['id']}", json={"name": "  "})

        assert response.status_code == 422

    def test_surrounding_whitespace_stripped(self, client: TestClient) -> None:
        hostel = _create(client, name="  North Wing  ", address=" 1 College Road ")

        assert hostel["name"] == "North Wing"
        assert hostel["address"] == "1 College Road"
