import time
from urllib.parse import parse_qs

import structlog
from flask import g, request

log = structlog.get_logger(__name__)


class MethodOverrideMiddleware:
    """Lets HTML forms reach PATCH, PUT and DELETE handlers.

    A POST is re-dispatched when its query string carries ``_method`` or
    the request sends an ``X-HTTP-Method-Override`` header. The form body is
    left untouched so the handler can still read it.
    """

    allowed_methods = frozenset(['PATCH', 'PUT', 'DELETE'])

    def __init__(self, app):
        self.app = app

    def __call__(self, environ, start_response):
        if environ.get('REQUEST_METHOD') == 'POST':
            method = environ.get('HTTP_X_HTTP_METHOD_OVERRIDE')
            if not method:
                values = parse_qs(environ.get('QUERY_STRING', '')).get('_method')
                method = values[-1] if values else None
            if method and method.upper() in self.allowed_methods:
                environ['REQUEST_METHOD'] = method.upper()
        return self.app(environ, start_response)


def register_request_timing(app):

    @app.before_request
    def _start_timer():
        g.request_started = time.perf_counter()

    @app.after_request
    def _add_timing(response):
        started = g.pop('request_started', None)
        if started is not None:
            dur_ms = int((time.perf_counter() - started) * 1000)
            response.headers['X-Response-Time-ms'] = str(dur_ms)
            log.info('request_completed', method=request.method, path=request.path,
                     status=response.status_code, duration_ms=dur_ms)
        return response
