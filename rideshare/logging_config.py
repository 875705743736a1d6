import logging

import structlog
from pythonjsonlogger.json import JsonFormatter


def setup_logging(app) -> None:
    level = logging.getLevelName(str(app.config.get('LOG_LEVEL', 'INFO')).upper())
    if not isinstance(level, int):
        level = logging.INFO
    json_logs = app.config.get('LOG_JSON', True)

    handler = logging.StreamHandler()
    if json_logs:
        handler.setFormatter(JsonFormatter('%(levelname)s %(message)s %(name)s %(asctime)s'))
    else:
        handler.setFormatter(logging.Formatter('%(asctime)s %(levelname)s %(name)s %(message)s'))
    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(level)

    renderer = structlog.processors.JSONRenderer() if json_logs else structlog.dev.ConsoleRenderer(colors=False)
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt='iso'),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        cache_logger_on_first_use=False,
    )
