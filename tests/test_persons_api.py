from phonebook_api.app.main import create_app
from phonebook_api.app.services.person_service import PersonDirectory


def test_list_persons(client):
    response = client.get("/api/persons")
    assert response.status_code == 200
    body = response.json()
    assert len(body) == 4
    assert body[0] == {"id": "1", "name": "Arto Hellas", "number": "040-123456"}


def test_get_person(client):
    response = client.get("/api/persons/3")
    assert response.status_code == 200
    assert response.json() == {"id": "3", "name": "Dan Abramov", "number": "12-43-234345"}


def test_get_unknown_person_is_404_without_body(client):
    response = client.get("/api/persons/123")
    assert response.status_code == 404
    assert response.content == b""


def test_create_duplicate_name(client):
    response = client.post("/api/persons", json={"name": "Mary Poppendieck", "number": "1-2-3"})
    assert response.status_code == 400
    assert response.json() == {"error": "name must be unique"}
    assert len(client.get("/api/persons").json()) == 4


def test_create_person(client):
    response = client.post("/api/persons", json={"name": "New Person", "number": "000-0000"})
    assert response.status_code == 200
    assert response.json() == {"id": "5", "name": "New Person", "number": "000-0000"}
    assert len(client.get("/api/persons").json()) == 5


def test_create_ignores_unknown_fields(client):
    response = client.post("/api/persons", json={"name": "X", "number": "1", "id": "999", "email": "x@y"})
    assert response.status_code == 200
    assert response.json() == {"id": "5", "name": "X", "number": "1"}


def test_create_missing_fields(client):
    response = client.post("/api/persons", json={"number": "1"})
    assert response.status_code == 400
    assert response.json() == {"error": "name is missing"}

    response = client.post("/api/persons", json={"name": "Someone", "number": ""})
    assert response.status_code == 400
    assert response.json() == {"error": "number is missing"}


def test_create_malformed_body(client):
    response = client.post(
        "/api/persons",
        content=b"not json",
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 400
    assert response.json() == {"error": "malformed request body"}


def test_delete_then_get(client):
    response = client.delete("/api/persons/2")
    assert response.status_code == 204
    assert response.content == b""
    assert client.get("/api/persons/2").status_code == 404


def test_delete_unknown_is_idempotent(client):
    assert client.delete("/api/persons/77").status_code == 204
    assert client.delete("/api/persons/77").status_code == 204
    assert len(client.get("/api/persons").json()) == 4


def test_apps_do_not_share_state():
    first = create_app(PersonDirectory())
    second = create_app(PersonDirectory())
    first.state.directory.delete_person("1")
    assert second.state.directory.count() == 4


def test_cors_headers(client):
    response = client.get("/api/persons", headers={"Origin": "http://localhost:5173"})
    assert response.headers["access-control-allow-origin"] == "*"


def test_create_without_body_reports_missing_name(client):
    response = client.post("/api/persons")
    assert response.status_code == 400
    assert response.json() == {"error": "name is missing"}
    assert len(client.get("/api/persons").json()) == 4


def test_trailing_slash_paths_answer_directly(client):
    response = client.get("/api/persons/", follow_redirects=False)
    assert response.status_code == 200
    assert len(response.json()) == 4

    response = client.get("/api/persons/1/", follow_redirects=False)
    assert response.status_code == 200
    assert response.json()["name"] == "Arto Hellas"

    response = client.post("/api/persons/", json={"name": "Slash", "number": "1"}, follow_redirects=False)
    assert response.status_code == 200
    assert response.json()["id"] == "5"

    assert client.delete("/api/persons/5/", follow_redirects=False).status_code == 204
    assert client.get("/info/", follow_redirects=False).status_code == 200
