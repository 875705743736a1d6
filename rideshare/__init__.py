from flask import Flask
from flask_sqlalchemy import SQLAlchemy
from config import Config

# Initialize extensions
db = SQLAlchemy()

# Create app factory
def create_app(config_class=Config):
    app = Flask(__name__)
    app.config.from_object(config_class)

    from .logging_config import setup_logging
    setup_logging(app)

    db.init_app(app)

    from .middleware import MethodOverrideMiddleware, register_request_timing
    app.wsgi_app = MethodOverrideMiddleware(app.wsgi_app)
    register_request_timing(app)

    from .errors import register_error_handlers
    from .routes import register_blueprints
    register_error_handlers(app)
    register_blueprints(app)

    return app
