from datetime import date, time
from pydantic import BaseModel, Field
from dentalclinic.models.visit import VisitRecord
from dentalclinic.models._fields import NaiveTime

class VisitCreate(BaseModel):
    patient_id: int
    doctor_id: int
    service_id: int
    visit_date: date = Field(..., description="YYYY-MM-DD")
    visit_time: NaiveTime = Field(..., description="HH:MM[:SS]")
    is_completed: bool = False

    def to_model(self) -> VisitRecord:
        return VisitRecord(
            patient_id=self.patient_id,
            doctor_id=self.doctor_id,
            service_id=self.service_id,
            date=self.visit_date,
            time=self.visit_time,
            is_completed=self.is_completed,
        )

class VisitOut(BaseModel):
    id: int
    patient_id: int
    doctor_id: int
    service_id: int
    visit_date: date
    visit_time: time
    is_completed: bool

    @staticmethod
    def from_model(v: VisitRecord) -> "VisitOut":
        return VisitOut(
            id=v.id,
            patient_id=v.patient_id,
            doctor_id=v.doctor_id,
            service_id=v.service_id,
            visit_date=v.date,
            visit_time=v.time,
            is_completed=v.is_completed,
        )
