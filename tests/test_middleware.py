from __future__ import annotations

import logging

import pytest
from flask import Flask, request

from fruitstand.middleware import MethodOverrideMiddleware, init_request_logging


@pytest.fixture
def echo_app():
    app = Flask(__name__)

    @app.route("/echo", methods=["GET", "POST", "PUT", "PATCH", "DELETE"])
    def echo():
        return request.method

    app.wsgi_app = MethodOverrideMiddleware(app.wsgi_app)
    init_request_logging(app)
    return app


@pytest.mark.parametrize("override", ["PUT", "put", "DELETE", "PATCH"])
def test_post_with_override_is_rewritten(echo_app, override):
    response = echo_app.test_client().post(f"/echo?_method={override}")
    assert response.get_data(as_text=True) == override.upper()


def test_unsupported_override_is_ignored(echo_app):
    response = echo_app.test_client().post("/echo?_method=GET")
    assert response.get_data(as_text=True) == "POST"


def test_override_only_applies_to_post(echo_app):
    response = echo_app.test_client().get("/echo?_method=DELETE")
    assert response.get_data(as_text=True) == "GET"


def test_access_line_logged(echo_app, caplog):
    with caplog.at_level(logging.INFO, logger="fruitstand.access"):
        echo_app.test_client().get("/echo?x=1")

    messages = [record.getMessage() for record in caplog.records if record.name == "fruitstand.access"]
    assert len(messages) == 1
    assert messages[0].startswith("GET /echo?x=1 200 3 - ")
    assert messages[0].endswith(" ms")
