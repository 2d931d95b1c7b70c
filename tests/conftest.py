import pytest

from library_api import create_app
from library_api.config import TestingConfig
from library_api.extensions import db
from library_api.services.auth_service import AuthService

ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "s3cret-pass"


@pytest.fixture
def app():
    app = create_app(TestingConfig)
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def admin_id(app):
    with app.app_context():
        user = AuthService.create_user(ADMIN_USERNAME, ADMIN_PASSWORD)
        return user.user_id


def login(client, username=ADMIN_USERNAME, password=ADMIN_PASSWORD):
    return client.post("/api/admin/adminlogin", json={"username": username, "password": password})


@pytest.fixture
def token(client, admin_id):
    res = login(client)
    assert res.status_code == 200
    return res.get_json()["token"]


@pytest.fixture
def auth_headers(token):
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def add_book(client, auth_headers):
    def _add(**fields):
        res = client.post("/api/books/add_book", headers=auth_headers, json=fields)
        assert res.status_code == 201, res.get_json()
        return res.get_json()["Id"]
    return _add
