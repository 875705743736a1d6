"""Validation run by the handlers before any write.

Each ``validate_*`` function takes the submitted fields (already merged over
the stored record for updates) and returns ``(values, errors)``: the coerced
values ready for the repository, or ``None`` when ``errors`` is not empty.
"""

from datetime import datetime, timezone
from typing import Annotated, List, NamedTuple, Optional

from pydantic import AfterValidator, BaseModel, BeforeValidator, Field, ValidationError, field_validator
from pydantic_core import PydanticCustomError

VIN_TAKEN = 'has already been taken'


class FieldError(NamedTuple):
    field: str
    message: str

    def __str__(self):
        return f'{self.field} {self.message}'


def _blank(value) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _required(value):
    if _blank(value):
        raise PydanticCustomError('blank', "can't be blank")
    return value


def _naive_utc(value: datetime) -> datetime:
    # timestamp columns are naive and hold UTC
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


class DriverForm(BaseModel):
    name: Annotated[str, BeforeValidator(_required)]
    vin: Annotated[str, BeforeValidator(_required)]
    available: bool = True


class PassengerForm(BaseModel):
    name: Annotated[str, BeforeValidator(_required)]


class TripForm(BaseModel):
    driver_id: Annotated[int, BeforeValidator(_required)]
    passenger_id: Annotated[int, BeforeValidator(_required)]
    date: Annotated[datetime, BeforeValidator(_required), AfterValidator(_naive_utc)]
    rating: Optional[Annotated[int, Field(ge=1, le=5)]] = None

    @field_validator('rating', mode='before')
    @classmethod
    def blank_rating_is_none(cls, value):
        return None if _blank(value) else value


def _check(schema, fields):
    try:
        return schema.model_validate(fields).model_dump(), []
    except ValidationError as exc:
        errors = []
        for err in exc.errors():
            field = '.'.join(str(part) for part in err['loc']) or 'base'
            message = "can't be blank" if err['type'] == 'missing' else err['msg']
            errors.append(FieldError(field, message))
        return None, errors


def validate_driver(fields, drivers, record_id=None):
    """Validate a driver payload; ``drivers`` is used for the vin uniqueness check."""
    values, errors = _check(DriverForm, fields)
    if values is not None:
        holder = drivers.find_by_vin(values['vin'])
        if holder is not None and holder.id != record_id:
            return None, [FieldError('vin', VIN_TAKEN)]
    return values, errors


def validate_passenger(fields):
    return _check(PassengerForm, fields)


def validate_trip(fields, drivers, passengers):
    values, errors = _check(TripForm, fields)
    if values is None:
        return None, errors
    missing: List[FieldError] = []
    if not drivers.exists(values['driver_id']):
        missing.append(FieldError('driver_id', 'must exist'))
    if not passengers.exists(values['passenger_id']):
        missing.append(FieldError('passenger_id', 'must exist'))
    if missing:
        return None, missing
    return values, []
