from __future__ import annotations

from rideshare import db
from rideshare.models import Passenger, Trip


class TestPassengerReads:

    def test_index_with_and_without_passengers(self, client, app):
        assert client.get("/passengers").status_code == 200

        db.session.add(Passenger(name="Grace"))
        db.session.commit()
        response = client.get("/passengers")

        assert response.status_code == 200
        assert b"Grace" in response.data

    def test_show_existing_passenger(self, client, passenger, driver):
        response = client.get(f"/passengers/{passenger.id}")

        assert response.status_code == 200
        assert b"sample passenger" in response.data
        # available drivers are offered in the trip request form
        assert b"sample driver" in response.data

    def test_show_missing_passenger(self, client):
        assert client.get("/passengers/-1").status_code == 404

    def test_new_form(self, client):
        response = client.get("/passengers/new")

        assert response.status_code == 200
        assert b'name="passenger[name]"' in response.data

    def test_edit_form(self, client, passenger):
        assert client.get(f"/passengers/{passenger.id}/edit").status_code == 200

    def test_edit_missing_passenger_redirects_home(self, client, redirect_path):
        response = client.get("/passengers/-1/edit")

        assert response.status_code == 302
        assert redirect_path(response) == "/"


class TestPassengerCreate:

    def test_valid_passenger_is_saved(self, client, count, redirect_path):
        response = client.post("/passengers", data={"passenger[name]": "Grace Hopper"})

        assert count(Passenger) == 1
        created = db.session.scalars(db.select(Passenger)).one()
        assert created.name == "Grace Hopper"
        assert response.status_code == 302
        assert redirect_path(response) == f"/passengers/{created.id}"

    def test_blank_name_is_rejected(self, client, count):
        response = client.post("/passengers", data={"passenger[name]": "   "})

        assert response.status_code == 400
        assert count(Passenger) == 0


class TestPassengerUpdate:

    def test_valid_update(self, client, passenger, redirect_path):
        response = client.patch(f"/passengers/{passenger.id}", data={"passenger[name]": "Renamed"})

        assert response.status_code == 302
        assert redirect_path(response) == f"/passengers/{passenger.id}"
        assert db.session.get(Passenger, passenger.id).name == "Renamed"

    def test_invalid_update_keeps_the_name(self, client, passenger, redirect_path):
        response = client.put(f"/passengers/{passenger.id}", data={"passenger[name]": ""})

        db.session.refresh(passenger)
        assert passenger.name == "sample passenger"
        assert response.status_code == 302
        assert redirect_path(response) == "/"

    def test_missing_passenger(self, client, passenger, count):
        response = client.patch("/passengers/-1", data={"passenger[name]": "Nobody"})

        assert response.status_code == 404
        assert count(Passenger) == 1


class TestPassengerDestroy:

    def test_existing_passenger_is_removed(self, client, passenger, trip, count, redirect_path):
        passenger_id = passenger.id

        response = client.delete(f"/passengers/{passenger_id}")

        assert count(Passenger) == 0
        assert response.status_code == 302
        assert redirect_path(response) == "/passengers"
        assert client.get(f"/passengers/{passenger_id}").status_code == 404
        # trips outlive their passenger
        assert count(Trip) == 1
        assert db.session.get(Trip, trip.id).passenger_id is None

    def test_missing_passenger(self, client, passenger, count):
        response = client.delete("/passengers/-1")

        assert response.status_code == 404
        assert count(Passenger) == 1
