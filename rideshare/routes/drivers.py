import structlog
from flask import Blueprint, redirect, render_template, url_for
from sqlalchemy.exc import IntegrityError

from .. import db
from ..repositories import DriverRepository
from ..validators import VIN_TAKEN, FieldError, validate_driver
from . import flash_errors, request_fields

bp = Blueprint('drivers', __name__, url_prefix='/drivers')
log = structlog.get_logger(__name__)


def _drivers():
    return DriverRepository(db.session)


@bp.route('', methods=['GET'])
def index():
    return render_template('drivers/index.html', drivers=_drivers().list())


@bp.route('/<int(signed=True):driver_id>', methods=['GET'])
def show(driver_id):
    driver = _drivers().get_or_raise(driver_id)
    return render_template('drivers/show.html', driver=driver)


@bp.route('/new', methods=['GET'])
def new():
    return render_template('drivers/new.html', values={'available': True}, errors=[])


@bp.route('', methods=['POST'])
def create():
    drivers = _drivers()
    fields = request_fields('driver')
    values, errors = validate_driver(fields, drivers)
    if errors:
        log.warning('driver_validation_failed', errors=[str(e) for e in errors])
        return render_template('drivers/new.html', values=fields, errors=errors), 400

    try:
        driver = drivers.create(**values)
    except IntegrityError:
        # vin taken between the uniqueness check and the insert
        db.session.rollback()
        errors = [FieldError('vin', VIN_TAKEN)]
        log.warning('driver_vin_conflict', vin=values['vin'])
        return render_template('drivers/new.html', values=fields, errors=errors), 400
    log.info('driver_created', driver_id=driver.id)
    return redirect(url_for('drivers.show', driver_id=driver.id))


@bp.route('/<int(signed=True):driver_id>/edit', methods=['GET'])
def edit(driver_id):
    driver = _drivers().get(driver_id)
    if driver is None:
        return redirect(url_for('home.index'))
    values = {'name': driver.name, 'vin': driver.vin, 'available': driver.available}
    return render_template('drivers/edit.html', driver=driver, values=values, errors=[])


@bp.route('/<int(signed=True):driver_id>', methods=['PATCH', 'PUT'])
def update(driver_id):
    drivers = _drivers()
    driver = drivers.get_or_raise(driver_id)

    merged = {'name': driver.name, 'vin': driver.vin, 'available': driver.available}
    merged.update(request_fields('driver'))
    values, errors = validate_driver(merged, drivers, record_id=driver.id)
    if errors:
        log.warning('driver_validation_failed', driver_id=driver.id, errors=[str(e) for e in errors])
        flash_errors(errors)
        return redirect(url_for('home.index'))

    try:
        drivers.update(driver, **values)
    except IntegrityError:
        db.session.rollback()
        log.warning('driver_vin_conflict', driver_id=driver_id, vin=values['vin'])
        flash_errors([FieldError('vin', VIN_TAKEN)])
        return redirect(url_for('home.index'))
    log.info('driver_updated', driver_id=driver.id)
    return redirect(url_for('drivers.show', driver_id=driver.id))


@bp.route('/<int(signed=True):driver_id>', methods=['DELETE'])
def destroy(driver_id):
    drivers = _drivers()
    driver = drivers.get_or_raise(driver_id)
    drivers.delete(driver)
    log.info('driver_deleted', driver_id=driver_id)
    return redirect(url_for('drivers.index'))
