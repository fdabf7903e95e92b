from fastapi import APIRouter, Depends

from dentalclinic.api.deps import get_store, get_service_or_404
from dentalclinic.schemas.service import ServiceCreate, ServiceOut
from dentalclinic.services.store import ClinicStore

router = APIRouter(prefix="/services", tags=["services"])

@router.post("/", response_model=ServiceOut, status_code=201)
def create_service(payload: ServiceCreate, store: ClinicStore = Depends(get_store)):
    s = store.add_service(payload.to_model())
    return ServiceOut.model_validate(s)

@router.get("/", response_model=list[ServiceOut])
def list_services(store: ClinicStore = Depends(get_store)):
    return [ServiceOut.model_validate(s) for s in store.services]

@router.get("/{id}", response_model=ServiceOut)
def get_service(id: int, store: ClinicStore = Depends(get_store)):
    return ServiceOut.model_validate(get_service_or_404(store, id))
