import logging
from collections.abc import Callable, Iterable
from typing import Any

from dentalclinic.core.errors import DecodeError
from dentalclinic.core.storage import BlobStore, EntityKind
from dentalclinic.models import Doctor, Patient, Payment, Service, VisitRecord
from dentalclinic.services import codec

logger = logging.getLogger(__name__)


def _next_id(items: Iterable[Any]) -> int:
    return max((item.id for item in items), default=0) + 1


def _find(items: list[Any], id: int) -> Any | None:
    return next((item for item in items if item.id == id), None)


class ClinicStore:
    """
    In-memory clinic records with write-through persistence.

    Five ordered collections, one blob each. Ids are per kind, assigned on add
    and recomputed from the loaded data (``max + 1``), never stored. Every
    mutation rewrites the collections it touched before returning.
    """

    def __init__(self, blobs: BlobStore, *, autoload: bool = True):
        self.blobs = blobs
        self.doctors: list[Doctor] = []
        self.patients: list[Patient] = []
        self.services: list[Service] = []
        self.visit_records: list[VisitRecord] = []
        self.payments: list[Payment] = []
        self._next_ids: dict[EntityKind, int] = {kind: 1 for kind in EntityKind}
        if autoload:
            self.load()

    def _collection(self, kind: EntityKind) -> list[Any]:
        return {
            EntityKind.doctors: self.doctors,
            EntityKind.patients: self.patients,
            EntityKind.services: self.services,
            EntityKind.visits: self.visit_records,
            EntityKind.payments: self.payments,
        }[kind]

    # ---------- persistence ----------
    def _load_kind(self, kind: EntityKind) -> list[Any]:
        text = self.blobs.read(kind)
        items = []
        # split on "\n" only; other line-break characters are kept in the line
        for number, line in enumerate(text.split("\n"), start=1):
            line = line.rstrip("\r")
            if not line.strip():
                continue
            try:
                items.append(codec.decode(kind, line))
            except DecodeError as e:
                # one bad line drops the whole collection; nothing is partially loaded
                logger.warning("discarding all %s: line %d unreadable (%s)", kind.value, number, e.reason)
                return []
        return items

    def load(self) -> None:
        self.doctors = self._load_kind(EntityKind.doctors)
        self.patients = self._load_kind(EntityKind.patients)
        self.services = self._load_kind(EntityKind.services)
        self.visit_records = self._load_kind(EntityKind.visits)
        self.payments = self._load_kind(EntityKind.payments)
        self._recompute_next_ids()
        logger.info(
            "loaded %d doctors, %d patients, %d services, %d visits, %d payments",
            len(self.doctors), len(self.patients), len(self.services),
            len(self.visit_records), len(self.payments),
        )

    def _recompute_next_ids(self) -> None:
        self._next_ids = {kind: _next_id(self._collection(kind)) for kind in EntityKind}

    def _save(self, *kinds: EntityKind) -> None:
        for kind in kinds:
            lines = [codec.encode(item) for item in self._collection(kind)]
            self.blobs.write(kind, "\n".join(lines) + "\n" if lines else "")

    def save(self) -> None:
        self._save(*EntityKind)

    def _take_id(self, kind: EntityKind) -> int:
        id = self._next_ids[kind]
        self._next_ids[kind] = id + 1
        return id

    # ---------- add ----------
    def add_doctor(self, doctor: Doctor) -> Doctor:
        stored = doctor.model_copy(update={"id": self._take_id(EntityKind.doctors)}, deep=True)
        self.doctors.append(stored)
        self._save(EntityKind.doctors)
        logger.info("added doctor %d (%s)", stored.id, stored)
        return stored

    def add_patient(self, patient: Patient) -> Patient:
        # back-references start empty; only this store appends to them
        stored = patient.model_copy(
            update={"id": self._take_id(EntityKind.patients), "visit_ids": [], "payment_ids": []},
            deep=True,
        )
        self.patients.append(stored)
        self._save(EntityKind.patients)
        logger.info("added patient %d", stored.id)
        return stored

    def add_service(self, service: Service) -> Service:
        stored = service.model_copy(update={"id": self._take_id(EntityKind.services)})
        self.services.append(stored)
        self._save(EntityKind.services)
        logger.info("added service %d (%s)", stored.id, stored.name)
        return stored

    def add_visit_record(self, visit: VisitRecord) -> VisitRecord:
        stored = visit.model_copy(update={"id": self._take_id(EntityKind.visits)})
        self.visit_records.append(stored)
        patient = self.get_patient(stored.patient_id)
        if patient is not None:
            patient.visit_ids.append(stored.id)
        else:
            logger.warning("visit %d references unknown patient %d", stored.id, stored.patient_id)
        self._save(EntityKind.visits, EntityKind.patients)
        logger.info("added visit %d", stored.id)
        return stored

    def add_payment(self, payment: Payment) -> Payment:
        stored = payment.model_copy(update={"id": self._take_id(EntityKind.payments)})
        self.payments.append(stored)
        patient = self.get_patient(stored.patient_id)
        if patient is not None:
            patient.payment_ids.append(stored.id)
        else:
            logger.warning("payment %d references unknown patient %d", stored.id, stored.patient_id)
        self._save(EntityKind.payments, EntityKind.patients)
        logger.info("added payment %d (%s)", stored.id, stored.amount)
        return stored

    # ---------- remove ----------
    def doctor_has_visits(self, doctor_id: int) -> bool:
        return any(v.doctor_id == doctor_id for v in self.visit_records)

    def remove_doctor(self, doctor_id: int) -> bool:
        doctor = self.get_doctor(doctor_id)
        if doctor is None or self.doctor_has_visits(doctor_id):
            return False
        self.doctors.remove(doctor)
        self._save(EntityKind.doctors)
        logger.info("removed doctor %d", doctor_id)
        return True

    # ---------- lookups ----------
    def get_doctor(self, id: int) -> Doctor | None:
        return _find(self.doctors, id)

    def get_patient(self, id: int) -> Patient | None:
        return _find(self.patients, id)

    def get_service(self, id: int) -> Service | None:
        return _find(self.services, id)

    def get_visit_record(self, id: int) -> VisitRecord | None:
        return _find(self.visit_records, id)

    def get_payment(self, id: int) -> Payment | None:
        return _find(self.payments, id)

    def _resolve(self, ids: list[int], lookup: Callable[[int], Any]) -> list[Any]:
        found = (lookup(i) for i in ids)
        return [item for item in found if item is not None]

    def visits_for_patient(self, patient_id: int) -> list[VisitRecord]:
        patient = self.get_patient(patient_id)
        if patient is None:
            return []
        return self._resolve(patient.visit_ids, self.get_visit_record)

    def payments_for_patient(self, patient_id: int) -> list[Payment]:
        patient = self.get_patient(patient_id)
        if patient is None:
            return []
        return self._resolve(patient.payment_ids, self.get_payment)
