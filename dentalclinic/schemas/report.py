from decimal import Decimal
from pydantic import BaseModel
from dentalclinic.schemas.patient import PatientOut
from dentalclinic.schemas.service import ServiceOut

class ServiceUsageOut(BaseModel):
    service: ServiceOut
    count: int

class PatientDebtOut(BaseModel):
    patient: PatientOut
    debt: Decimal

class MonthlyIncomeOut(BaseModel):
    year: int
    month: int
    income: Decimal

class AveragePaymentOut(BaseModel):
    average: Decimal
