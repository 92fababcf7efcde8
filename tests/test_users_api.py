# File: tests/test_users_api.py

from types import SimpleNamespace

from app.core.security import generate_jwt

ALICE = {"name": "alice", "email": "a@x.com", "password": "secret"}


def _register(client, payload=ALICE):
    resp = client.post("/api/v1/auth/register", json=payload)
    assert resp.status_code == 201
    return resp.json()["user"]


def test_list_users_hides_passwords(client):
    _register(client)
    _register(client, {"name": "bob", "email": "b@x.com", "password": "pw"})

    resp = client.get("/api/v1/users")
    assert resp.status_code == 200
    users = resp.json()
    assert {u["email"] for u in users} == {"a@x.com", "b@x.com"}
    assert all("password" not in u for u in users)


def test_get_user_by_id(client):
    _register(client)
    user_id = client.get("/api/v1/users").json()[0]["id"]

    resp = client.get(f"/api/v1/users/{user_id}")
    assert resp.status_code == 200
    assert resp.json()["user"]["email"] == "a@x.com"


def test_get_user_by_id_missing(client):
    resp = client.get("/api/v1/users/12345")
    assert resp.status_code == 401
    assert resp.json()["detail"]["errors"] == {"User": " not found"}


def test_current_user_from_token(client):
    token = _register(client)["token"]

    resp = client.get("/api/v1/user", headers={"Authorization": f"Bearer {token}"})
    assert resp.status_code == 200
    assert resp.json()["user"]["name"] == "alice"


def test_current_user_requires_token(client):
    resp = client.get("/api/v1/user")
    assert resp.status_code == 401
    assert resp.json()["detail"]["errors"] == {"token": "is missing"}


def test_current_user_rejects_bad_token(client):
    resp = client.get("/api/v1/user", headers={"Authorization": "Bearer garbage"})
    assert resp.status_code == 401


def _auth(token):
    return {"Authorization": f"Bearer {token}"}


def _token_for(settings, **claims):
    fields = {"id": 999, "name": "ghost", "email": "ghost@x.com"}
    fields.update(claims)
    return generate_jwt(SimpleNamespace(**fields), settings.jwt_secret)


def test_update_user(client):
    token = _register(client)["token"]
    user_id = client.get("/api/v1/users").json()[0]["id"]

    resp = client.put(
        f"/api/v1/users/{user_id}",
        json={"bio": "hi", "password": "changed"},
        headers=_auth(token),
    )
    assert resp.status_code == 200
    body = resp.json()
    assert body["bio"] == "hi"
    assert "password" not in body

    login = client.post("/api/v1/auth/login", json={"email": "a@x.com", "password": "changed"})
    assert login.status_code == 200


def test_update_requires_token(client):
    _register(client)
    user_id = client.get("/api/v1/users").json()[0]["id"]

    resp = client.put(f"/api/v1/users/{user_id}", json={"password": "pwned"})
    assert resp.status_code == 401

    login = client.post("/api/v1/auth/login", json={"email": "a@x.com", "password": "secret"})
    assert login.status_code == 200


def test_update_rejects_other_users_token(client):
    _register(client)
    bob_token = _register(client, {"name": "bob", "email": "b@x.com", "password": "pw"})["token"]
    alice_id = next(u["id"] for u in client.get("/api/v1/users").json() if u["name"] == "alice")

    resp = client.put(
        f"/api/v1/users/{alice_id}",
        json={"password": "pwned"},
        headers=_auth(bob_token),
    )
    assert resp.status_code == 401
    assert resp.json()["detail"]["errors"] == {"token": "does not belong to this user"}


def test_update_missing_user(client, settings):
    resp = client.put(
        "/api/v1/users/999",
        json={"bio": "hi"},
        headers=_auth(_token_for(settings, id=999)),
    )
    assert resp.status_code == 401
    assert resp.json()["detail"]["errors"] == {"User": " not found"}


def test_update_password_too_long(client):
    token = _register(client)["token"]
    user_id = client.get("/api/v1/users").json()[0]["id"]

    resp = client.put(
        f"/api/v1/users/{user_id}",
        json={"password": "é" * 40},
        headers=_auth(token),
    )
    assert resp.status_code == 400
    assert "password" in resp.json()["detail"]["errors"]


def test_delete_user(client):
    token = _register(client)["token"]

    resp = client.delete("/api/v1/users/a@x.com", headers=_auth(token))
    assert resp.status_code == 200
    assert resp.json() == {"affected": 1}
    assert client.get("/api/v1/users").json() == []


def test_delete_requires_token(client):
    _register(client)

    resp = client.delete("/api/v1/users/a@x.com")
    assert resp.status_code == 401
    assert len(client.get("/api/v1/users").json()) == 1


def test_delete_rejects_other_users_token(client):
    _register(client)
    bob_token = _register(client, {"name": "bob", "email": "b@x.com", "password": "pw"})["token"]

    resp = client.delete("/api/v1/users/a@x.com", headers=_auth(bob_token))
    assert resp.status_code == 401
    assert len(client.get("/api/v1/users").json()) == 2


def test_delete_unknown_email(client, settings):
    token = _token_for(settings, email="nobody@x.com")

    resp = client.delete("/api/v1/users/nobody@x.com", headers=_auth(token))
    assert resp.status_code == 200
    assert resp.json() == {"affected": 0}
