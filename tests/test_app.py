import re

import pytest

from library_api import create_app
from library_api.config import Config, config_for_env
from library_api.utils.ids import generate_unique_id, new_issue_id, new_record_id


class MissingSecretConfig(Config):
    JWT_SECRET_KEY = None
    SQLALCHEMY_DATABASE_URI = None


def test_production_requires_secret_and_database():
    with pytest.raises(RuntimeError, match="JWT_SECRET_KEY"):
        create_app(MissingSecretConfig)


def test_unknown_app_env():
    with pytest.raises(RuntimeError):
        config_for_env("staging")


def test_health(client):
    res = client.get("/health")
    assert res.status_code == 200
    assert res.get_json() == {"Status": True}


def test_unknown_route_is_json(client):
    res = client.get("/api/nowhere")
    assert res.status_code == 404
    assert res.get_json()["Status"] is False


def test_generate_unique_id():
    assert re.fullmatch(r"[A-Za-z0-9]{20}", generate_unique_id())
    assert re.fullmatch(r"[A-Za-z0-9]{20}", new_record_id())
    assert re.fullmatch(r"[A-Za-z0-9]{8}", new_issue_id())
    assert len({generate_unique_id(8) for _ in range(200)}) == 200
