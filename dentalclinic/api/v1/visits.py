from datetime import date

from fastapi import APIRouter, Depends, Query

from dentalclinic.api.deps import get_store
from dentalclinic.schemas.visit import VisitCreate, VisitOut
from dentalclinic.services import analytics
from dentalclinic.services.store import ClinicStore

router = APIRouter(prefix="/visits", tags=["visits"])

# references are not checked here; the reports surface dangling ids
@router.post("/", response_model=VisitOut, status_code=201)
def create_visit(payload: VisitCreate, store: ClinicStore = Depends(get_store)):
    v = store.add_visit_record(payload.to_model())
    return VisitOut.from_model(v)

@router.get("/", response_model=list[VisitOut])
def list_visits(store: ClinicStore = Depends(get_store)):
    return [VisitOut.from_model(v) for v in store.visit_records]

@router.get("/today", response_model=list[VisitOut])
def todays_visits(
    on: date | None = Query(None, description="defaults to the server's current date"),
    store: ClinicStore = Depends(get_store),
):
    return [VisitOut.from_model(v) for v in analytics.todays_appointments(store, on)]
