from flask import Blueprint, render_template

from .. import db
from ..repositories import DriverRepository, PassengerRepository, TripRepository

bp = Blueprint('home', __name__)


# ---- Home ----
@bp.route('/')
def index():
    counts = {
        'drivers': DriverRepository(db.session).count(),
        'passengers': PassengerRepository(db.session).count(),
        'trips': TripRepository(db.session).count(),
    }
    return render_template('home/index.html', counts=counts)
