"""HTTP-level tests for the movie routes.

Uses FastAPI's test client against a freshly seeded application per
test, in both the default and the legacy body handling modes.
"""

import pytest

NOT_FOUND = {"message": "Movie not found"}
DEEPLY_NESTED = b"[" * 200000 + b"]" * 200000


def list_ids(client):
    return [m["id"] for m in client.get("/movies").json()]


# --- GET /movies ---

def test_list_returns_seed_movies_in_order(client):
    resp = client.get("/movies")
    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("application/json")
    assert [m["id"] for m in resp.json()] == ["1", "2"]


# --- GET /movies/{id} ---

def test_get_seed_movie(client):
    resp = client.get("/movies/1")
    assert resp.status_code == 200
    assert resp.json() == {
        "id": "1",
        "isbn": "438277",
        "title": "Movie One",
        "director": {"firstname": "John", "lastname": "Doe"},
    }


def test_get_missing_movie_is_200_with_message(client):
    resp = client.get("/movies/999")
    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("application/json")
    assert resp.json() == NOT_FOUND


def test_get_is_repeatable(client):
    first = client.get("/movies/2").json()
    for _ in range(3):
        assert client.get("/movies/2").json() == first


# --- POST /movies ---

def test_create_appends_with_generated_id(client, new_movie):
    before = list_ids(client)
    resp = client.post("/movies", json=dict(new_movie, id="abc"))
    assert resp.status_code == 200
    created = resp.json()
    assert created["id"].isdigit()
    assert created["id"] not in before
    assert created["title"] == "New Movie"
    assert created["director"] == {"firstname": "A", "lastname": "B"}
    after = list_ids(client)
    assert after == before + [created["id"]]


def test_create_malformed_body_rejected(client):
    resp = client.post("/movies", content=b"{not json", headers={"Content-Type": "application/json"})
    assert resp.status_code == 400
    assert resp.json()["detail"]
    assert list_ids(client) == ["1", "2"]


def test_create_malformed_body_legacy_stores_empty_movie(legacy_client):
    resp = legacy_client.post("/movies", content=b"{not json")
    assert resp.status_code == 200
    created = resp.json()
    assert created["isbn"] == "" and created["title"] == "" and created["director"] is None
    assert list_ids(legacy_client)[-1] == created["id"]


def test_create_deeply_nested_body_rejected(client):
    resp = client.post("/movies", content=DEEPLY_NESTED)
    assert resp.status_code == 400
    assert list_ids(client) == ["1", "2"]


def test_create_deeply_nested_body_legacy_stores_empty_movie(legacy_client):
    resp = legacy_client.post("/movies", content=DEEPLY_NESTED)
    assert resp.status_code == 200
    created = resp.json()
    assert created["title"] == "" and created["director"] is None
    assert list_ids(legacy_client) == ["1", "2", created["id"]]


def test_create_legacy_decodes_like_first_release(legacy_client):
    resp = legacy_client.post("/movies", content=b'{"Title": "Loose", "isbn": "5"} trailing')
    assert resp.status_code == 200
    assert resp.json()["title"] == "Loose"
    assert resp.json()["isbn"] == "5"


# --- PUT /movies/{id} ---

@pytest.mark.parametrize("fixture_name", ["client", "legacy_client"])
def test_update_moves_record_to_end(request, fixture_name):
    client = request.getfixturevalue(fixture_name)
    resp = client.put("/movies/1", json={"id": "77", "isbn": "x", "title": "Updated", "director": None})
    assert resp.status_code == 200
    assert resp.json() == {"id": "1", "isbn": "x", "title": "Updated", "director": None}
    movies = client.get("/movies").json()
    assert [m["id"] for m in movies] == ["2", "1"]
    assert movies[-1]["title"] == "Updated"


def test_update_missing_is_200_with_message(client):
    resp = client.put("/movies/999", json={"title": "ghost"})
    assert resp.status_code == 200
    assert resp.json() == NOT_FOUND
    assert list_ids(client) == ["1", "2"]


def test_update_malformed_body_keeps_record(client):
    resp = client.put("/movies/1", content=b"{broken")
    assert resp.status_code == 400
    assert resp.json()["detail"]
    assert client.get("/movies/1").json()["title"] == "Movie One"
    assert list_ids(client) == ["1", "2"]


def test_update_malformed_body_legacy_loses_record(legacy_client):
    resp = legacy_client.put("/movies/1", content=b"{broken")
    assert resp.status_code == 400
    assert legacy_client.get("/movies/1").json() == NOT_FOUND
    assert list_ids(legacy_client) == ["2"]


def test_update_deeply_nested_body_keeps_record(client):
    resp = client.put("/movies/1", content=DEEPLY_NESTED)
    assert resp.status_code == 400
    assert list_ids(client) == ["1", "2"]


def test_update_deeply_nested_body_legacy_is_400(legacy_client):
    resp = legacy_client.put("/movies/1", content=DEEPLY_NESTED)
    assert resp.status_code == 400
    assert list_ids(legacy_client) == ["2"]


def test_update_malformed_body_legacy_missing_id_is_not_found(legacy_client):
    resp = legacy_client.put("/movies/999", content=b"{broken")
    assert resp.status_code == 200
    assert resp.json() == NOT_FOUND


# --- DELETE /movies/{id} ---

def test_delete_returns_remaining_list(client):
    resp = client.delete("/movies/2")
    assert resp.status_code == 200
    assert [m["id"] for m in resp.json()] == ["1"]
    again = client.delete("/movies/2")
    assert again.status_code == 200
    assert again.json() == resp.json()


def test_delete_missing_returns_full_list(client):
    resp = client.delete("/movies/999")
    assert [m["id"] for m in resp.json()] == ["1", "2"]


# --- application wiring ---

def test_each_app_owns_its_store():
    from fastapi.testclient import TestClient

    from movies_api.app.main import create_app

    first, second = TestClient(create_app()), TestClient(create_app())
    first.delete("/movies/1")
    assert list_ids(first) == ["2"]
    assert list_ids(second) == ["1", "2"]
