from fastapi import APIRouter, Depends

from dentalclinic.api.deps import get_store, get_patient_or_404
from dentalclinic.schemas.patient import PatientCreate, PatientOut
from dentalclinic.schemas.payment import PaymentOut
from dentalclinic.schemas.visit import VisitOut
from dentalclinic.services.store import ClinicStore

router = APIRouter(prefix="/patients", tags=["patients"])

@router.post("/", response_model=PatientOut, status_code=201)
def create_patient(payload: PatientCreate, store: ClinicStore = Depends(get_store)):
    pt = store.add_patient(payload.to_model())
    return PatientOut.model_validate(pt)

@router.get("/", response_model=list[PatientOut])
def list_patients(store: ClinicStore = Depends(get_store)):
    return [PatientOut.model_validate(p) for p in store.patients]

@router.get("/{id}", response_model=PatientOut)
def get_patient(id: int, store: ClinicStore = Depends(get_store)):
    return PatientOut.model_validate(get_patient_or_404(store, id))

# visit history, in back-reference order
@router.get("/{id}/visits", response_model=list[VisitOut])
def patient_visits(id: int, store: ClinicStore = Depends(get_store)):
    get_patient_or_404(store, id)
    return [VisitOut.from_model(v) for v in store.visits_for_patient(id)]

@router.get("/{id}/payments", response_model=list[PaymentOut])
def patient_payments(id: int, store: ClinicStore = Depends(get_store)):
    get_patient_or_404(store, id)
    return [PaymentOut.from_model(p) for p in store.payments_for_patient(id)]
