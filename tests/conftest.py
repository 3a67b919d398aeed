"""Shared fixtures: an app rooted in a temporary directory and its test client."""
import logging

import pytest

import lan
from app import create_app
from config import ServerConfig

logging.basicConfig(
    level=logging.DEBUG,
    format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
)


@pytest.fixture
def share_config(tmp_path):
    return ServerConfig(base_dir=tmp_path, port=5000)


@pytest.fixture
def fake_lan_ip(monkeypatch):
    monkeypatch.setattr(lan, "resolve_lan_ip", lambda: "192.168.1.20")
    return "192.168.1.20"


@pytest.fixture
def app(share_config, fake_lan_ip):
    app = create_app(share_config)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    with app.test_client() as c:
        yield c


@pytest.fixture
def store(app):
    return app.extensions["file_store"]
