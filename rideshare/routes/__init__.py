from flask import flash, request


def request_fields(scope):
    """Fields submitted under ``scope``, as ``scope[field]`` form keys or a JSON object."""
    if request.is_json:
        payload = request.get_json(silent=True) or {}
        nested = payload.get(scope) if isinstance(payload, dict) else None
        return dict(nested) if isinstance(nested, dict) else {}

    prefix = f'{scope}['
    fields = {}
    for key in request.form.keys():
        if key.startswith(prefix) and key.endswith(']'):
            # hidden field + checkbox pairs: last value wins
            fields[key[len(prefix):-1]] = request.form.getlist(key)[-1]
    return fields


def flash_errors(errors):
    for error in errors:
        flash(str(error), 'error')


def register_blueprints(app):
    from .home import bp as home_bp
    from .drivers import bp as drivers_bp
    from .passengers import bp as passengers_bp
    from .trips import bp as trips_bp

    app.register_blueprint(home_bp)
    app.register_blueprint(drivers_bp)
    app.register_blueprint(passengers_bp)
    app.register_blueprint(trips_bp)
