"""WSGI and request-level plumbing for the Flask app."""

from __future__ import annotations

import logging
import time
from typing import Any, Callable, Iterable
from urllib.parse import parse_qs

from flask import Flask, Response, g, request

access_logger = logging.getLogger('fruitstand.access')

OVERRIDABLE_METHODS = frozenset({'PUT', 'PATCH', 'DELETE'})


class MethodOverrideMiddleware:
    """Rewrite ``POST`` requests carrying ``?_method=PUT`` (or PATCH/DELETE).

    HTML forms can only submit GET and POST, so edit and delete forms post to
    ``/fruits/<id>?_method=PUT`` and ``/fruits/<id>?_method=DELETE``.
    """

    def __init__(self, wsgi_app: Callable[..., Iterable[bytes]], param: str = '_method') -> None:
        self.wsgi_app = wsgi_app
        self.param = param

    def __call__(self, environ: dict, start_response: Callable[..., Any]) -> Iterable[bytes]:
        if environ.get('REQUEST_METHOD', '').upper() == 'POST':
            query = parse_qs(environ.get('QUERY_STRING', ''))
            values = query.get(self.param)
            if values:
                method = values[0].upper()
                if method in OVERRIDABLE_METHODS:
                    environ['fruitstand.original_method'] = 'POST'
                    environ['REQUEST_METHOD'] = method
        return self.wsgi_app(environ, start_response)


def init_request_logging(app: Flask) -> None:
    """Log one access line per request: method, path, status, size, elapsed."""

    @app.before_request
    def _start_timer() -> None:
        g.request_started = time.perf_counter()

    @app.after_request
    def _log_request(response: Response) -> Response:
        started = g.pop('request_started', None)
        elapsed_ms = (time.perf_counter() - started) * 1000 if started is not None else 0.0
        length = response.calculate_content_length()
        access_logger.info(
            '%s %s %s %s - %.3f ms',
            request.method,
            request.full_path.rstrip('?'),
            response.status_code,
            '-' if length is None else length,
            elapsed_ms,
        )
        return response
