# rideshare/models.py
from . import db


class TimestampMixin:
    created_at = db.Column(db.DateTime, nullable=False, server_default=db.func.now())
    updated_at = db.Column(db.DateTime, nullable=False, server_default=db.func.now(), onupdate=db.func.now())


# ---- Driver model ----
class Driver(TimestampMixin, db.Model):
    __tablename__ = 'drivers'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String, nullable=False)
    vin = db.Column(db.String, nullable=False, unique=True)
    available = db.Column(db.Boolean, nullable=False, default=True)

    # No delete cascade: removing a driver nulls driver_id on its trips.
    trips = db.relationship('Trip', back_populates='driver', order_by='Trip.date')

    @property
    def average_rating(self):
        ratings = [trip.rating for trip in self.trips if trip.rating is not None]
        if not ratings:
            return None
        return round(sum(ratings) / len(ratings), 2)

    def __repr__(self):
        return f'<Driver {self.id} {self.name!r}>'


# ---- Passenger model ----
class Passenger(TimestampMixin, db.Model):
    __tablename__ = 'passengers'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String, nullable=False)

    trips = db.relationship('Trip', back_populates='passenger', order_by='Trip.date')

    def __repr__(self):
        return f'<Passenger {self.id} {self.name!r}>'


# ---- Trip model ----
class Trip(TimestampMixin, db.Model):
    __tablename__ = 'trips'

    id = db.Column(db.Integer, primary_key=True)
    driver_id = db.Column(db.Integer, db.ForeignKey('drivers.id', ondelete='SET NULL'), nullable=True, index=True)
    passenger_id = db.Column(db.Integer, db.ForeignKey('passengers.id', ondelete='SET NULL'), nullable=True, index=True)
    date = db.Column(db.DateTime)
    rating = db.Column(db.Integer)

    driver = db.relationship('Driver', back_populates='trips')
    passenger = db.relationship('Passenger', back_populates='trips')

    def __repr__(self):
        return f'<Trip {self.id} driver={self.driver_id} passenger={self.passenger_id}>'
