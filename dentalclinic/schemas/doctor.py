from pydantic import BaseModel

from dentalclinic.models.doctor import Doctor, Weekday, WorkShift
from dentalclinic.models._fields import NaiveTime, PlainText

class WorkShiftIn(BaseModel):
    start: NaiveTime
    end: NaiveTime

class DoctorCreate(BaseModel):
    full_name: PlainText
    specialization: PlainText
    schedule: dict[Weekday, WorkShiftIn] = {}

    def to_model(self) -> Doctor:
        return Doctor(
            full_name=self.full_name,
            specialization=self.specialization,
            schedule={day: WorkShift(start=s.start, end=s.end) for day, s in self.schedule.items()},
        )

class DoctorOut(BaseModel):
    id: int
    full_name: str
    specialization: str
    schedule: dict[Weekday, WorkShiftIn] = {}
    display_name: str

    @staticmethod
    def from_model(d: Doctor) -> "DoctorOut":
        return DoctorOut(
            id=d.id,
            full_name=d.full_name,
            specialization=d.specialization,
            schedule={day: WorkShiftIn(start=s.start, end=s.end) for day, s in d.schedule.items()},
            display_name=str(d),
        )
