from decimal import Decimal

from pydantic import BaseModel, Field

from dentalclinic.models._fields import PlainText

class Service(BaseModel):
    id: int = 0
    name: PlainText
    price: Decimal = Field(ge=0)

    def __str__(self) -> str:
        return f"{self.name} - {self.price}"
