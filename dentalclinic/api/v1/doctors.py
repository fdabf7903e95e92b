from fastapi import APIRouter, Depends, HTTPException, Query

from dentalclinic.api.deps import get_store, get_doctor_or_404
from dentalclinic.models import Weekday
from dentalclinic.schemas.doctor import DoctorCreate, DoctorOut
from dentalclinic.services import analytics
from dentalclinic.services.store import ClinicStore

router = APIRouter(prefix="/doctors", tags=["doctors"])

# ---------- create ----------
@router.post("/", response_model=DoctorOut, status_code=201)
def create_doctor(payload: DoctorCreate, store: ClinicStore = Depends(get_store)):
    d = store.add_doctor(payload.to_model())
    return DoctorOut.from_model(d)

# ---------- list ----------
@router.get("/", response_model=list[DoctorOut])
def list_doctors(
    weekday: Weekday | None = Query(None, description="only doctors working that day"),
    store: ClinicStore = Depends(get_store),
):
    docs = analytics.doctors_working_on(store, weekday) if weekday else store.doctors
    return [DoctorOut.from_model(d) for d in docs]

# ---------- read ----------
@router.get("/{id}", response_model=DoctorOut)
def get_doctor(id: int, store: ClinicStore = Depends(get_store)):
    return DoctorOut.from_model(get_doctor_or_404(store, id))

# ---------- delete ----------
@router.delete("/{id}", status_code=204)
def delete_doctor(id: int, store: ClinicStore = Depends(get_store)):
    get_doctor_or_404(store, id)
    if not store.remove_doctor(id):
        raise HTTPException(status_code=409, detail="Doctor has visit records and cannot be removed")
    return
