import structlog
from flask import render_template
from werkzeug.exceptions import HTTPException

from . import db

log = structlog.get_logger(__name__)


class RecordNotFound(LookupError):
    """Raised when an identifier has no stored row."""

    def __init__(self, entity, record_id):
        super().__init__(f'{entity} {record_id} not found')
        self.entity = entity
        self.record_id = record_id


def register_error_handlers(app):

    @app.errorhandler(RecordNotFound)
    def record_not_found(exc):
        log.info('record_not_found', entity=exc.entity, record_id=exc.record_id)
        return render_template('errors/404.html', message=str(exc)), 404

    @app.errorhandler(404)
    def page_not_found(exc):
        return render_template('errors/404.html', message=exc.description), 404

    @app.errorhandler(Exception)
    def unhandled_error(exc):
        if isinstance(exc, HTTPException):
            return exc
        db.session.rollback()
        log.exception('unhandled_error', error=str(exc))
        return render_template('errors/500.html'), 500
