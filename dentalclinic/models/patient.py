from pydantic import BaseModel, Field

from dentalclinic.models._fields import PlainText

class Patient(BaseModel):
    id: int = 0
    full_name: PlainText
    # back-references, appended by the store only
    visit_ids: list[int] = Field(default_factory=list)
    payment_ids: list[int] = Field(default_factory=list)

    def __str__(self) -> str:
        return self.full_name
