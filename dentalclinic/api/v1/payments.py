from fastapi import APIRouter, Depends

from dentalclinic.api.deps import get_store
from dentalclinic.schemas.payment import PaymentCreate, PaymentOut
from dentalclinic.services.store import ClinicStore

router = APIRouter(prefix="/payments", tags=["payments"])

@router.post("/", response_model=PaymentOut, status_code=201)
def create_payment(payload: PaymentCreate, store: ClinicStore = Depends(get_store)):
    p = store.add_payment(payload.to_model())
    return PaymentOut.from_model(p)

@router.get("/", response_model=list[PaymentOut])
def list_payments(store: ClinicStore = Depends(get_store)):
    return [PaymentOut.from_model(p) for p in store.payments]
