from tests.conftest import login


def test_add_user_then_login(client, auth_headers):
    res = client.post(
        "/api/admin/add_user",
        headers=auth_headers,
        json={"username": "librarian", "password": "pw-123"},
    )
    assert res.status_code == 201
    assert res.get_json()["Status"] is True

    assert login(client, "librarian", "pw-123").status_code == 200
    assert login(client, "librarian", "wrong").status_code == 401


def test_add_user_requires_auth(client):
    res = client.post("/api/admin/add_user", json={"username": "x", "password": "y"})
    assert res.status_code == 401


def test_add_user_missing_fields(client, auth_headers):
    res = client.post("/api/admin/add_user", headers=auth_headers, json={"username": "only"})
    assert res.status_code == 400
    assert res.get_json()["Error"] == "Username and password required"


def test_add_user_duplicate_username(client, auth_headers):
    res = client.post(
        "/api/admin/add_user",
        headers=auth_headers,
        json={"username": "admin", "password": "whatever"},
    )
    assert res.status_code == 409


def test_list_users_hides_hashes(client, auth_headers, admin_id):
    res = client.get("/api/admin/users", headers=auth_headers)
    assert res.status_code == 200
    users = res.get_json()["Users"]
    assert users == [{"user_id": admin_id, "username": "admin"}]


def test_edit_user(client, auth_headers):
    user_id = client.post(
        "/api/admin/add_user",
        headers=auth_headers,
        json={"username": "old-name", "password": "pw"},
    ).get_json()["UserId"]

    res = client.put(
        f"/api/admin/edit_user/{user_id}",
        headers=auth_headers,
        json={"username": "new-name", "password": "pw2"},
    )
    assert res.status_code == 200
    assert login(client, "new-name", "pw2").status_code == 200
    assert login(client, "old-name", "pw").status_code == 404


def test_edit_user_without_changes(client, auth_headers, admin_id):
    res = client.put(f"/api/admin/edit_user/{admin_id}", headers=auth_headers, json={})
    assert res.status_code == 400
    assert res.get_json()["Error"] == "No updates provided"


def test_edit_unknown_user(client, auth_headers):
    res = client.put("/api/admin/edit_user/missing", headers=auth_headers, json={"username": "z"})
    assert res.status_code == 404


def test_delete_user(client, auth_headers):
    user_id = client.post(
        "/api/admin/add_user",
        headers=auth_headers,
        json={"username": "temp", "password": "pw"},
    ).get_json()["UserId"]

    assert client.delete(f"/api/admin/delete_user/{user_id}", headers=auth_headers).status_code == 200
    assert client.delete(f"/api/admin/delete_user/{user_id}", headers=auth_headers).status_code == 404


def test_profile_of_deleted_user(client, auth_headers, admin_id):
    client.delete(f"/api/admin/delete_user/{admin_id}", headers=auth_headers)
    res = client.get("/api/admin/profile", headers=auth_headers)
    assert res.status_code == 404


def test_add_user_rejects_non_string_fields(client, auth_headers):
    res = client.post("/api/admin/add_user", headers=auth_headers, json={"username": 42, "password": "pw"})
    assert res.status_code == 400
    assert res.get_json() == {"Status": False, "Error": "username must be a string"}


def test_add_user_rejects_non_object_body(client, auth_headers):
    res = client.post("/api/admin/add_user", headers=auth_headers, json="librarian")
    assert res.status_code == 400
    assert res.get_json()["Error"] == "JSON object body required"


def test_edit_user_rejects_non_string_fields(client, auth_headers, admin_id):
    res = client.put(f"/api/admin/edit_user/{admin_id}", headers=auth_headers, json={"password": 1234})
    assert res.status_code == 400
    assert res.get_json()["Error"] == "password must be a string"
    assert login(client).status_code == 200
