from datetime import date, time
from decimal import Decimal

from dentalclinic.models import Doctor, Patient, Payment, Service, VisitRecord, Weekday, WorkShift


def make_doctor(name: str = "Ana Ruiz", specialization: str = "Orthodontics", days=(Weekday.monday,)) -> Doctor:
    return Doctor(
        full_name=name,
        specialization=specialization,
        schedule={day: WorkShift(start=time(9), end=time(17)) for day in days},
    )


def make_visit(patient_id: int, service_id: int, doctor_id: int = 1, *, on: date = date(2024, 1, 10),
               at: time = time(10), completed: bool = True) -> VisitRecord:
    return VisitRecord(
        patient_id=patient_id, doctor_id=doctor_id, service_id=service_id,
        date=on, time=at, is_completed=completed,
    )


def make_payment(patient_id: int, amount, on: date = date(2024, 1, 10)) -> Payment:
    return Payment(patient_id=patient_id, amount=Decimal(str(amount)), date=on)


def make_service(name: str, price) -> Service:
    return Service(name=name, price=Decimal(str(price)))


def make_patient(name: str = "Luis Gomez") -> Patient:
    return Patient(full_name=name)
