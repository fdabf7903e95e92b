from fastapi import APIRouter, Depends, HTTPException, Query

from dentalclinic.api.deps import get_store
from dentalclinic.core.config import settings
from dentalclinic.core.errors import MissingReferenceError
from dentalclinic.schemas.patient import PatientOut
from dentalclinic.schemas.report import AveragePaymentOut, MonthlyIncomeOut, PatientDebtOut, ServiceUsageOut
from dentalclinic.schemas.service import ServiceOut
from dentalclinic.services import analytics
from dentalclinic.services.store import ClinicStore

router = APIRouter(prefix="/reports", tags=["reports"])

def _conflict(e: MissingReferenceError) -> HTTPException:
    return HTTPException(status_code=409, detail=str(e))

@router.get("/popular-services", response_model=list[ServiceUsageOut])
def popular_services(
    top: int = Query(settings.POPULAR_SERVICES_LIMIT, ge=1, le=100),
    store: ClinicStore = Depends(get_store),
):
    try:
        usage = analytics.most_popular_services(store, top)
    except MissingReferenceError as e:
        raise _conflict(e)
    return [ServiceUsageOut(service=ServiceOut.model_validate(u.service), count=u.count) for u in usage]

@router.get("/debtors", response_model=list[PatientDebtOut])
def debtors(store: ClinicStore = Depends(get_store)):
    try:
        rows = analytics.patients_with_debt(store)
    except MissingReferenceError as e:
        raise _conflict(e)
    return [PatientDebtOut(patient=PatientOut.model_validate(r.patient), debt=r.debt) for r in rows]

@router.get("/income", response_model=MonthlyIncomeOut)
def income(
    year: int = Query(..., ge=1, le=9999),
    month: int = Query(..., ge=1, le=12),
    store: ClinicStore = Depends(get_store),
):
    return MonthlyIncomeOut(year=year, month=month, income=analytics.monthly_income(store, year, month))

@router.get("/average-payment", response_model=AveragePaymentOut)
def average_payment(store: ClinicStore = Depends(get_store)):
    return AveragePaymentOut(average=analytics.average_payment(store))
