import structlog
from flask import Blueprint, redirect, render_template, url_for

from .. import db
from ..repositories import DriverRepository, PassengerRepository, TripRepository
from ..validators import validate_trip
from . import flash_errors, request_fields

bp = Blueprint('trips', __name__)
log = structlog.get_logger(__name__)


def _render_form(values, errors, status=200, driver=None):
    return render_template(
        'trips/new.html',
        values=values,
        errors=errors,
        driver=driver,
        drivers=DriverRepository(db.session).list(),
        passengers=PassengerRepository(db.session).list(),
    ), status


def _create(fields):
    trips = TripRepository(db.session)
    values, errors = validate_trip(fields, DriverRepository(db.session), PassengerRepository(db.session))
    if errors:
        log.warning('trip_validation_failed', errors=[str(e) for e in errors])
        return _render_form(fields, errors, status=400)

    trip = trips.create(**values)
    log.info('trip_created', trip_id=trip.id, driver_id=trip.driver_id, passenger_id=trip.passenger_id)
    return redirect(url_for('trips.show', trip_id=trip.id))


@bp.route('/passengers/<int(signed=True):passenger_id>/trips', methods=['POST'])
def create_for_passenger(passenger_id):
    PassengerRepository(db.session).get_or_raise(passenger_id)
    fields = request_fields('trip')
    fields['passenger_id'] = passenger_id
    return _create(fields)


@bp.route('/trips', methods=['POST'])
def create():
    return _create(request_fields('trip'))


@bp.route('/drivers/<int(signed=True):driver_id>/trips/new', methods=['GET'])
def new(driver_id):
    driver = DriverRepository(db.session).get(driver_id)
    if driver is None:
        return redirect(url_for('home.index'))
    return _render_form({'driver_id': driver.id}, [], driver=driver)


@bp.route('/drivers/<int(signed=True):driver_id>/trips/<int(signed=True):trip_id>', methods=['GET'])
def show_for_driver(driver_id, trip_id):
    trip = TripRepository(db.session).get_for_driver(driver_id, trip_id)
    return render_template('trips/show.html', trip=trip)


@bp.route('/trips/<int(signed=True):trip_id>', methods=['GET'])
def show(trip_id):
    trip = TripRepository(db.session).get_or_raise(trip_id)
    return render_template('trips/show.html', trip=trip)


@bp.route('/trips/<int(signed=True):trip_id>/edit', methods=['GET'])
def edit(trip_id):
    trip = TripRepository(db.session).get(trip_id)
    if trip is None:
        return redirect(url_for('home.index'))
    values = {
        'driver_id': trip.driver_id,
        'passenger_id': trip.passenger_id,
        'date': trip.date.strftime('%Y-%m-%dT%H:%M') if trip.date else '',
        'rating': trip.rating,
    }
    return render_template(
        'trips/edit.html',
        trip=trip,
        values=values,
        errors=[],
        drivers=DriverRepository(db.session).list(),
        passengers=PassengerRepository(db.session).list(),
    )


@bp.route('/trips/<int(signed=True):trip_id>', methods=['PATCH', 'PUT'])
def update(trip_id):
    trips = TripRepository(db.session)
    trip = trips.get_or_raise(trip_id)

    merged = {
        'driver_id': trip.driver_id,
        'passenger_id': trip.passenger_id,
        'date': trip.date,
        'rating': trip.rating,
    }
    merged.update(request_fields('trip'))
    values, errors = validate_trip(merged, DriverRepository(db.session), PassengerRepository(db.session))
    if errors:
        log.warning('trip_validation_failed', trip_id=trip.id, errors=[str(e) for e in errors])
        flash_errors(errors)
        return redirect(url_for('home.index'))

    trips.update(trip, **values)
    log.info('trip_updated', trip_id=trip.id)
    return redirect(url_for('trips.show', trip_id=trip.id))


@bp.route('/trips/<int(signed=True):trip_id>', methods=['DELETE'])
def destroy(trip_id):
    trips = TripRepository(db.session)
    trip = trips.get_or_raise(trip_id)
    passenger_id = trip.passenger_id
    trips.delete(trip)
    log.info('trip_deleted', trip_id=trip_id)
    if passenger_id is None:
        return redirect(url_for('home.index'))
    return redirect(url_for('passengers.show', passenger_id=passenger_id))
