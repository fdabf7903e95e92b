from fastapi import HTTPException, Request

from dentalclinic.models import Doctor, Patient, Service
from dentalclinic.services.store import ClinicStore

def get_store(request: Request) -> ClinicStore:
    return request.app.state.store

# --- lookups that fail with 404 ---
def get_doctor_or_404(store: ClinicStore, id: int) -> Doctor:
    d = store.get_doctor(id)
    if d is None:
        raise HTTPException(status_code=404, detail="Doctor not found")
    return d

def get_patient_or_404(store: ClinicStore, id: int) -> Patient:
    p = store.get_patient(id)
    if p is None:
        raise HTTPException(status_code=404, detail="Patient not found")
    return p

def get_service_or_404(store: ClinicStore, id: int) -> Service:
    s = store.get_service(id)
    if s is None:
        raise HTTPException(status_code=404, detail="Service not found")
    return s
