from typing import List, Optional

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from .errors import RecordNotFound
from .models import Driver, Passenger, Trip

# Integer primary keys are signed 64-bit on every supported backend.
MIN_ID = -2 ** 63
MAX_ID = 2 ** 63 - 1


def id_in_range(record_id: int) -> bool:
    return MIN_ID <= record_id <= MAX_ID


class SQLRepository:
    """Data access for one model over a SQLAlchemy session.

    Every write commits its own transaction. Ids outside the column range
    are treated as absent.
    """

    model = None

    def __init__(self, session: Session):
        self.session = session

    def list(self) -> List:
        return list(self.session.scalars(select(self.model).order_by(self.model.id)))

    def count(self) -> int:
        return self.session.scalar(select(func.count(self.model.id)))

    def get(self, record_id: int) -> Optional[object]:
        if not id_in_range(record_id):
            return None
        return self.session.get(self.model, record_id)

    def get_or_raise(self, record_id: int):
        obj = self.get(record_id)
        if obj is None:
            raise RecordNotFound(self.model.__name__, record_id)
        return obj

    def exists(self, record_id: int) -> bool:
        return self.get(record_id) is not None

    def create(self, **fields):
        obj = self.model(**fields)
        self.session.add(obj)
        self.session.commit()
        return obj

    def update(self, obj, **fields):
        for name, value in fields.items():
            setattr(obj, name, value)
        self.session.commit()
        return obj

    def delete(self, obj) -> None:
        self.session.delete(obj)
        self.session.commit()


class DriverRepository(SQLRepository):
    model = Driver

    def find_by_vin(self, vin: str) -> Optional[Driver]:
        return self.session.scalars(select(Driver).where(Driver.vin == vin)).first()

    def list_available(self) -> List[Driver]:
        res = self.session.scalars(select(Driver).where(Driver.available.is_(True)).order_by(Driver.id))
        return list(res)


class PassengerRepository(SQLRepository):
    model = Passenger


class TripRepository(SQLRepository):
    model = Trip

    def get_for_driver(self, driver_id: int, trip_id: int) -> Trip:
        trip = None
        if id_in_range(driver_id) and id_in_range(trip_id):
            trip = self.session.scalars(
                select(Trip).where(Trip.id == trip_id, Trip.driver_id == driver_id)
            ).first()
        if trip is None:
            raise RecordNotFound('Trip', trip_id)
        return trip
