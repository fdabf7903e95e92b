"""Read-only reports over a ClinicStore. Nothing is cached between calls."""
from collections import Counter
from datetime import date
from decimal import Decimal
from typing import NamedTuple

from dentalclinic.core.errors import MissingReferenceError
from dentalclinic.models import Doctor, Patient, Payment, Service, VisitRecord, Weekday
from dentalclinic.services.store import ClinicStore


class ServiceUsage(NamedTuple):
    service: Service
    count: int


class PatientDebt(NamedTuple):
    patient: Patient
    debt: Decimal


def weekday_of(d: date) -> Weekday:
    return Weekday.of(d)


def doctors_working_on(store: ClinicStore, day: Weekday) -> list[Doctor]:
    return [d for d in store.doctors if d.works_on(day)]


def todays_appointments(store: ClinicStore, today: date | None = None) -> list[VisitRecord]:
    today = today or date.today()
    # sorted() is stable: visits at the same time keep insertion order
    return sorted((v for v in store.visit_records if v.date == today), key=lambda v: v.time)


def most_popular_services(store: ClinicStore, top_n: int = 5) -> list[ServiceUsage]:
    """
    Services ranked by number of visits, most visited first.

    Equal counts keep the order in which each service first shows up among
    the visits. A visit pointing at an unknown service raises
    MissingReferenceError.
    """
    if top_n <= 0:
        return []
    counts = Counter(v.service_id for v in store.visit_records)
    services = {s.id: s for s in store.services}
    usage = []
    for service_id, count in counts.items():
        service = services.get(service_id)
        if service is None:
            raise MissingReferenceError("service", service_id)
        usage.append(ServiceUsage(service, count))
    usage.sort(key=lambda u: u.count, reverse=True)
    return usage[:top_n]


class _Indexes(NamedTuple):
    visits: dict[int, VisitRecord]
    services: dict[int, Service]
    payments: dict[int, Payment]


def _indexes(store: ClinicStore) -> _Indexes:
    return _Indexes(
        visits={v.id: v for v in store.visit_records},
        services={s.id: s for s in store.services},
        payments={p.id: p for p in store.payments},
    )


def _debt(patient: Patient, idx: _Indexes) -> Decimal:
    visits, services, payments = idx

    cost = Decimal(0)
    for visit_id in patient.visit_ids:
        visit = visits.get(visit_id)
        if visit is None:
            raise MissingReferenceError("visit", visit_id)
        if not visit.is_completed:
            continue
        service = services.get(visit.service_id)
        if service is None:
            raise MissingReferenceError("service", visit.service_id)
        cost += service.price

    paid = Decimal(0)
    for payment_id in patient.payment_ids:
        payment = payments.get(payment_id)
        if payment is None:
            raise MissingReferenceError("payment", payment_id)
        paid += payment.amount

    return cost - paid


def patient_debt(store: ClinicStore, patient: Patient) -> Decimal:
    return _debt(patient, _indexes(store))


def patients_with_debt(store: ClinicStore) -> list[PatientDebt]:
    idx = _indexes(store)
    result = []
    for patient in store.patients:
        debt = _debt(patient, idx)
        if debt > 0:
            result.append(PatientDebt(patient, debt))
    return result


def monthly_income(store: ClinicStore, year: int, month: int) -> Decimal:
    if not 1 <= month <= 12:
        raise ValueError(f"month must be 1..12, got {month}")
    return sum(
        (p.amount for p in store.payments if p.date.year == year and p.date.month == month),
        Decimal(0),
    )


def average_payment(store: ClinicStore) -> Decimal:
    if not store.payments:
        return Decimal(0)
    total = sum((p.amount for p in store.payments), Decimal(0))
    return total / len(store.payments)
