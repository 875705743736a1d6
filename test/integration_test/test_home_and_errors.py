from __future__ import annotations

from unittest.mock import patch

from rideshare.repositories import DriverRepository


def test_home_page_shows_counts(client, trip):
    response = client.get("/")

    assert response.status_code == 200
    assert b"Drivers</a> (1)" in response.data
    assert b"Trips (1)" in response.data


def test_responses_carry_timing_header(client):
    response = client.get("/drivers")

    assert int(response.headers["X-Response-Time-ms"]) >= 0


def test_unknown_path_is_404(client):
    assert client.get("/nowhere").status_code == 404


def test_unexpected_error_renders_500(client):
    with patch.object(DriverRepository, "list", side_effect=RuntimeError("boom")):
        response = client.get("/drivers")

    assert response.status_code == 500
    assert b"Something went wrong" in response.data
