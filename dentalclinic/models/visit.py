import datetime

from pydantic import BaseModel

from dentalclinic.models._fields import NaiveTime

class VisitRecord(BaseModel):
    id: int = 0
    patient_id: int
    doctor_id: int
    service_id: int
    date: datetime.date
    time: NaiveTime
    is_completed: bool = False
