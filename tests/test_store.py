import logging
from datetime import time

from dentalclinic.core.storage import EntityKind, MemoryBlobStore
from dentalclinic.models import Patient, Weekday
from dentalclinic.services.store import ClinicStore

from factories import make_doctor, make_patient, make_payment, make_service, make_visit


def test_empty_store_starts_empty(store):
    assert store.doctors == []
    assert store.patients == []
    assert store.services == []
    assert store.visit_records == []
    assert store.payments == []


def test_ids_are_assigned_in_sequence(store):
    ids = [store.add_service(make_service(f"S{i}", 10)).id for i in range(5)]
    assert ids == [1, 2, 3, 4, 5]
    assert [s.id for s in store.services] == [1, 2, 3, 4, 5]


def test_ids_are_independent_per_kind(store):
    assert store.add_doctor(make_doctor()).id == 1
    assert store.add_patient(make_patient()).id == 1
    assert store.add_service(make_service("Cleaning", 50)).id == 1


def test_incoming_id_is_overwritten(store):
    d = make_doctor()
    d.id = 99
    stored = store.add_doctor(d)
    assert stored.id == 1
    assert d.id == 99


def test_reload_continues_after_highest_id():
    blobs = MemoryBlobStore({
        EntityKind.services: "3|A|10\n7|B|20\n2|C|30\n",
    })
    store = ClinicStore(blobs)
    assert [s.id for s in store.services] == [3, 7, 2]
    assert store.add_service(make_service("D", 40)).id == 8


def test_deleted_doctor_id_is_not_reused(store):
    store.add_doctor(make_doctor("A"))
    second = store.add_doctor(make_doctor("B"))
    assert store.remove_doctor(second.id) is True
    assert store.add_doctor(make_doctor("C")).id == 3


def test_every_add_writes_through(store, blobs):
    store.add_doctor(make_doctor())
    assert blobs.read(EntityKind.doctors) == "1|Ana Ruiz|Orthodontics|Monday:09:00:00:17:00:00\n"

    store.add_patient(make_patient())
    store.add_service(make_service("Cleaning", "50"))
    store.add_visit_record(make_visit(patient_id=1, service_id=1))
    store.add_payment(make_payment(patient_id=1, amount="20"))

    assert blobs.read(EntityKind.patients) == "1|Luis Gomez|1|1\n"
    assert blobs.read(EntityKind.visits) == "1|1|1|1|2024-01-10|10:00:00|True\n"
    assert blobs.read(EntityKind.payments) == "1|1|20|2024-01-10\n"


def test_persisted_state_reloads_identically(store, blobs):
    store.add_doctor(make_doctor(days=(Weekday.monday, Weekday.thursday)))
    store.add_patient(make_patient())
    store.add_service(make_service("Cleaning", "50.00"))
    store.add_visit_record(make_visit(patient_id=1, service_id=1, at=time(9, 15)))
    store.add_payment(make_payment(patient_id=1, amount="12.5"))

    again = ClinicStore(blobs)
    assert again.doctors == store.doctors
    assert again.patients == store.patients
    assert again.services == store.services
    assert again.visit_records == store.visit_records
    assert again.payments == store.payments


def test_visit_and_payment_update_patient_back_references(store):
    p = store.add_patient(make_patient())
    v1 = store.add_visit_record(make_visit(patient_id=p.id, service_id=1))
    v2 = store.add_visit_record(make_visit(patient_id=p.id, service_id=1))
    pay = store.add_payment(make_payment(patient_id=p.id, amount=10))

    patient = store.get_patient(p.id)
    assert patient.visit_ids == [v1.id, v2.id]
    assert patient.payment_ids == [pay.id]
    assert store.visits_for_patient(p.id) == [v1, v2]
    assert store.payments_for_patient(p.id) == [pay]


def test_unknown_patient_is_not_an_error(store):
    v = store.add_visit_record(make_visit(patient_id=42, service_id=1))
    assert store.visit_records == [v]
    assert store.visits_for_patient(42) == []


def test_new_patient_drops_supplied_back_references(store):
    p = store.add_patient(Patient(full_name="Luis Gomez", visit_ids=[5], payment_ids=[6]))
    assert p.visit_ids == []
    assert p.payment_ids == []


def test_remove_doctor_without_visits(store, blobs):
    d = store.add_doctor(make_doctor())
    assert store.remove_doctor(d.id) is True
    assert store.doctors == []
    assert blobs.read(EntityKind.doctors) == ""


def test_remove_doctor_with_visits_is_refused(store, blobs):
    d = store.add_doctor(make_doctor())
    store.add_visit_record(make_visit(patient_id=1, service_id=1, doctor_id=d.id))
    before = blobs.read(EntityKind.doctors)

    assert store.remove_doctor(d.id) is False
    assert store.doctors == [d]
    assert blobs.read(EntityKind.doctors) == before


def test_remove_unknown_doctor(store):
    assert store.remove_doctor(123) is False


def test_blank_lines_are_skipped():
    blobs = MemoryBlobStore({EntityKind.patients: "\n1|Ana||\n   \n2|Luis||\n\n"})
    store = ClinicStore(blobs)
    assert [p.full_name for p in store.patients] == ["Ana", "Luis"]


def test_corrupt_line_discards_only_that_collection(caplog):
    blobs = MemoryBlobStore({
        EntityKind.services: "1|Cleaning|50\n2|Filling|oops\n3|Crown|300\n",
        EntityKind.patients: "1|Ana||\n",
    })
    with caplog.at_level(logging.WARNING, logger="dentalclinic.services.store"):
        store = ClinicStore(blobs)

    assert store.services == []
    assert [p.id for p in store.patients] == [1]
    assert "discarding all services" in caplog.text
    # counters follow what was actually loaded
    assert store.add_service(make_service("Whitening", 80)).id == 1


def test_lookups(store):
    d = store.add_doctor(make_doctor())
    s = store.add_service(make_service("Cleaning", 50))
    assert store.get_doctor(d.id) == d
    assert store.get_service(s.id) == s
    assert store.get_doctor(99) is None
    assert store.get_payment(1) is None
    assert store.get_visit_record(1) is None


def test_only_newline_separates_stored_lines(caplog):
    blobs = MemoryBlobStore({EntityKind.services: "1|Cleaning|50\r\n2|Filling|30\r\n"})
    assert [s.name for s in ClinicStore(blobs).services] == ["Cleaning", "Filling"]

    # a form feed stays inside its line; the line is rejected whole
    blobs = MemoryBlobStore({EntityKind.services: "1|Cleaning|50\n2|Fill\x0cing|30\n3|Crown|300\n"})
    with caplog.at_level(logging.WARNING, logger="dentalclinic.services.store"):
        assert ClinicStore(blobs).services == []
    assert "line 2 unreadable" in caplog.text
    assert "may not contain" in caplog.text


def test_save_writes_every_collection(store, blobs):
    store.add_doctor(make_doctor(days=(Weekday.monday, Weekday.saturday)))
    store.add_patient(make_patient())
    store.add_service(make_service("Cleaning", "50"))
    store.add_visit_record(make_visit(patient_id=1, service_id=1))
    store.add_payment(make_payment(patient_id=1, amount="20"))
    blobs.blobs.clear()

    store.save()

    again = ClinicStore(blobs)
    assert again.doctors == store.doctors
    assert again.patients == store.patients
    assert again.services == store.services
    assert again.visit_records == store.visit_records
    assert again.payments == store.payments


def test_corrupt_collection_file_survives_unrelated_writes():
    corrupt = "1|Cleaning|50\n2|Filling|oops\n"
    blobs = MemoryBlobStore({EntityKind.services: corrupt})
    store = ClinicStore(blobs)

    store.add_patient(make_patient())
    store.add_doctor(make_doctor())
    store.add_visit_record(make_visit(patient_id=1, service_id=1))
    store.add_payment(make_payment(patient_id=1, amount="10"))

    assert blobs.read(EntityKind.services) == corrupt
    assert [p.id for p in ClinicStore(blobs).patients] == [1]
