"""
Line codec for the flat-file store.

Every entity is one line, fields joined by ``|`` with the id first::

    doctors   id|full_name|specialization|Monday:09:00:00:17:00:00;Friday:...
    patients  id|full_name|1,4,9|2,3
    services  id|name|price
    visits    id|patient_id|doctor_id|service_id|2024-01-05|09:30:00|True
    payments  id|patient_id|amount|2024-01-05
"""
from collections.abc import Callable
from datetime import date, time
from decimal import Decimal, InvalidOperation
from typing import Any

from pydantic import ValidationError

from dentalclinic.core.errors import DecodeError
from dentalclinic.core.storage import EntityKind
from dentalclinic.models import Doctor, Patient, Payment, Service, VisitRecord, Weekday, WorkShift

FIELD_SEP = "|"
SCHEDULE_SEP = ";"
SHIFT_SEP = ":"
LIST_SEP = ","

Entity = Doctor | Patient | Service | VisitRecord | Payment

# ---------- field helpers ----------
def _fields(line: str, minimum: int, maximum: int) -> list[str]:
    parts = line.split(FIELD_SEP)
    if not minimum <= len(parts) <= maximum:
        raise DecodeError(line, f"expected {minimum}-{maximum} fields, got {len(parts)}")
    return parts + [""] * (maximum - len(parts))

def _int(line: str, raw: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise DecodeError(line, f"bad integer {raw!r}")

def _decimal(line: str, raw: str) -> Decimal:
    try:
        value = Decimal(raw)
    except InvalidOperation:
        raise DecodeError(line, f"bad number {raw!r}")
    if not value.is_finite():
        raise DecodeError(line, f"bad number {raw!r}")
    return value

def _date(line: str, raw: str) -> date:
    try:
        return date.fromisoformat(raw)
    except ValueError:
        raise DecodeError(line, f"bad date {raw!r}")

def _time(line: str, raw: str) -> time:
    try:
        return time.fromisoformat(raw)
    except ValueError:
        raise DecodeError(line, f"bad time {raw!r}")

def _bool(line: str, raw: str) -> bool:
    lowered = raw.strip().lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    raise DecodeError(line, f"bad flag {raw!r}")

def _id_list(line: str, raw: str) -> list[int]:
    return [_int(line, item) for item in raw.split(LIST_SEP) if item.strip()]

def _build(line: str, model: Callable[..., Any], **values: Any) -> Any:
    try:
        return model(**values)
    except ValidationError as e:
        raise DecodeError(line, str(e))

# ---------- schedule ----------
def encode_schedule(schedule: dict[Weekday, WorkShift]) -> str:
    return SCHEDULE_SEP.join(
        f"{day.value}{SHIFT_SEP}{shift.start.isoformat()}{SHIFT_SEP}{shift.end.isoformat()}"
        for day, shift in schedule.items()
    )

def decode_schedule(line: str, raw: str) -> dict[Weekday, WorkShift]:
    schedule: dict[Weekday, WorkShift] = {}
    for item in raw.split(SCHEDULE_SEP):
        if not item:
            continue
        day_name, _, times = item.partition(SHIFT_SEP)
        try:
            day = Weekday(day_name)
        except ValueError:
            raise DecodeError(line, f"bad weekday {day_name!r}")
        # both times are HH:MM:SS, so the remainder has exactly six parts
        parts = times.split(SHIFT_SEP)
        if len(parts) != 6:
            raise DecodeError(line, f"bad shift {item!r}")
        start = _time(line, SHIFT_SEP.join(parts[:3]))
        end = _time(line, SHIFT_SEP.join(parts[3:]))
        schedule[day] = WorkShift(start=start, end=end)
    return schedule

# ---------- per entity ----------
def encode_doctor(d: Doctor) -> str:
    return FIELD_SEP.join([str(d.id), d.full_name, d.specialization, encode_schedule(d.schedule)])

def decode_doctor(line: str) -> Doctor:
    id_, full_name, specialization, schedule = _fields(line, 3, 4)
    return _build(
        line, Doctor,
        id=_int(line, id_),
        full_name=full_name,
        specialization=specialization,
        schedule=decode_schedule(line, schedule),
    )

def encode_patient(p: Patient) -> str:
    return FIELD_SEP.join([
        str(p.id),
        p.full_name,
        LIST_SEP.join(str(i) for i in p.visit_ids),
        LIST_SEP.join(str(i) for i in p.payment_ids),
    ])

def decode_patient(line: str) -> Patient:
    id_, full_name, visit_ids, payment_ids = _fields(line, 2, 4)
    return _build(
        line, Patient,
        id=_int(line, id_),
        full_name=full_name,
        visit_ids=_id_list(line, visit_ids),
        payment_ids=_id_list(line, payment_ids),
    )

def encode_service(s: Service) -> str:
    return FIELD_SEP.join([str(s.id), s.name, str(s.price)])

def decode_service(line: str) -> Service:
    id_, name, price = _fields(line, 3, 3)
    return _build(line, Service, id=_int(line, id_), name=name, price=_decimal(line, price))

def encode_visit(v: VisitRecord) -> str:
    return FIELD_SEP.join([
        str(v.id),
        str(v.patient_id),
        str(v.doctor_id),
        str(v.service_id),
        v.date.isoformat(),
        v.time.isoformat(),
        str(v.is_completed),
    ])

def decode_visit(line: str) -> VisitRecord:
    id_, patient_id, doctor_id, service_id, day, at, completed = _fields(line, 7, 7)
    return _build(
        line, VisitRecord,
        id=_int(line, id_),
        patient_id=_int(line, patient_id),
        doctor_id=_int(line, doctor_id),
        service_id=_int(line, service_id),
        date=_date(line, day),
        time=_time(line, at),
        is_completed=_bool(line, completed),
    )

def encode_payment(p: Payment) -> str:
    return FIELD_SEP.join([str(p.id), str(p.patient_id), str(p.amount), p.date.isoformat()])

def decode_payment(line: str) -> Payment:
    id_, patient_id, amount, day = _fields(line, 4, 4)
    return _build(
        line, Payment,
        id=_int(line, id_),
        patient_id=_int(line, patient_id),
        amount=_decimal(line, amount),
        date=_date(line, day),
    )

# ---------- dispatch ----------
ENCODERS: dict[type, Callable[[Any], str]] = {
    Doctor: encode_doctor,
    Patient: encode_patient,
    Service: encode_service,
    VisitRecord: encode_visit,
    Payment: encode_payment,
}

DECODERS: dict[EntityKind, Callable[[str], Any]] = {
    EntityKind.doctors: decode_doctor,
    EntityKind.patients: decode_patient,
    EntityKind.services: decode_service,
    EntityKind.visits: decode_visit,
    EntityKind.payments: decode_payment,
}

def encode(entity: Entity) -> str:
    try:
        encoder = ENCODERS[type(entity)]
    except KeyError:
        raise TypeError(f"no line encoding for {type(entity).__name__}")
    return encoder(entity)

def decode(kind: EntityKind, line: str) -> Entity:
    return DECODERS[kind](line)
