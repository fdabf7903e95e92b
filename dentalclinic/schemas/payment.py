from datetime import date
from decimal import Decimal
from pydantic import BaseModel, Field
from dentalclinic.models.payment import Payment

class PaymentCreate(BaseModel):
    patient_id: int
    amount: Decimal = Field(..., gt=0)
    paid_on: date = Field(..., description="YYYY-MM-DD")

    def to_model(self) -> Payment:
        return Payment(patient_id=self.patient_id, amount=self.amount, date=self.paid_on)

class PaymentOut(BaseModel):
    id: int
    patient_id: int
    amount: Decimal
    paid_on: date

    @staticmethod
    def from_model(p: Payment) -> "PaymentOut":
        return PaymentOut(id=p.id, patient_id=p.patient_id, amount=p.amount, paid_on=p.date)
