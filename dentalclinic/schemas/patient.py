from pydantic import BaseModel, ConfigDict
from typing import List
from dentalclinic.models.patient import Patient
from dentalclinic.models._fields import PlainText

class PatientCreate(BaseModel):
    full_name: PlainText

    def to_model(self) -> Patient:
        return Patient(full_name=self.full_name)

class PatientOut(BaseModel):
    id: int
    full_name: str
    visit_ids: List[int] = []
    payment_ids: List[int] = []

    model_config = ConfigDict(from_attributes=True)
