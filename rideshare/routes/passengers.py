import structlog
from flask import Blueprint, redirect, render_template, url_for

from .. import db
from ..repositories import DriverRepository, PassengerRepository
from ..validators import validate_passenger
from . import flash_errors, request_fields

bp = Blueprint('passengers', __name__, url_prefix='/passengers')
log = structlog.get_logger(__name__)


def _passengers():
    return PassengerRepository(db.session)


@bp.route('', methods=['GET'])
def index():
    return render_template('passengers/index.html', passengers=_passengers().list())


@bp.route('/<int(signed=True):passenger_id>', methods=['GET'])
def show(passenger_id):
    passenger = _passengers().get_or_raise(passenger_id)
    drivers = DriverRepository(db.session).list_available()
    return render_template('passengers/show.html', passenger=passenger, drivers=drivers,
                           values={}, errors=[])


@bp.route('/new', methods=['GET'])
def new():
    return render_template('passengers/new.html', values={}, errors=[])


@bp.route('', methods=['POST'])
def create():
    passengers = _passengers()
    fields = request_fields('passenger')
    values, errors = validate_passenger(fields)
    if errors:
        log.warning('passenger_validation_failed', errors=[str(e) for e in errors])
        return render_template('passengers/new.html', values=fields, errors=errors), 400

    passenger = passengers.create(**values)
    log.info('passenger_created', passenger_id=passenger.id)
    return redirect(url_for('passengers.show', passenger_id=passenger.id))


@bp.route('/<int(signed=True):passenger_id>/edit', methods=['GET'])
def edit(passenger_id):
    passenger = _passengers().get(passenger_id)
    if passenger is None:
        return redirect(url_for('home.index'))
    return render_template('passengers/edit.html', passenger=passenger,
                           values={'name': passenger.name}, errors=[])


@bp.route('/<int(signed=True):passenger_id>', methods=['PATCH', 'PUT'])
def update(passenger_id):
    passengers = _passengers()
    passenger = passengers.get_or_raise(passenger_id)

    merged = {'name': passenger.name}
    merged.update(request_fields('passenger'))
    values, errors = validate_passenger(merged)
    if errors:
        log.warning('passenger_validation_failed', passenger_id=passenger.id, errors=[str(e) for e in errors])
        flash_errors(errors)
        return redirect(url_for('home.index'))

    passengers.update(passenger, **values)
    log.info('passenger_updated', passenger_id=passenger.id)
    return redirect(url_for('passengers.show', passenger_id=passenger.id))


@bp.route('/<int(signed=True):passenger_id>', methods=['DELETE'])
def destroy(passenger_id):
    passengers = _passengers()
    passenger = passengers.get_or_raise(passenger_id)
    passengers.delete(passenger)
    log.info('passenger_deleted', passenger_id=passenger_id)
    return redirect(url_for('passengers.index'))
