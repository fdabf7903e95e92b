import enum
from datetime import date

from pydantic import BaseModel, Field

from dentalclinic.models._fields import NaiveTime, PlainText

class Weekday(str, enum.Enum):
    sunday = "Sunday"
    monday = "Monday"
    tuesday = "Tuesday"
    wednesday = "Wednesday"
    thursday = "Thursday"
    friday = "Friday"
    saturday = "Saturday"

    @classmethod
    def of(cls, d: date) -> "Weekday":
        # date.weekday(): Monday == 0
        return _BY_ISO_INDEX[d.weekday()]

_BY_ISO_INDEX = [
    Weekday.monday, Weekday.tuesday, Weekday.wednesday, Weekday.thursday,
    Weekday.friday, Weekday.saturday, Weekday.sunday,
]

class WorkShift(BaseModel):
    start: NaiveTime
    end: NaiveTime

class Doctor(BaseModel):
    id: int = 0
    full_name: PlainText
    specialization: PlainText
    schedule: dict[Weekday, WorkShift] = Field(default_factory=dict)

    def works_on(self, day: Weekday) -> bool:
        return day in self.schedule

    def __str__(self) -> str:
        return f"{self.full_name} ({self.specialization})"
