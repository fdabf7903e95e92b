import datetime
from decimal import Decimal

from pydantic import BaseModel

class Payment(BaseModel):
    id: int = 0
    patient_id: int
    amount: Decimal
    date: datetime.date
