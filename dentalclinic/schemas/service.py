from decimal import Decimal
from pydantic import BaseModel, ConfigDict, Field
from dentalclinic.models.service import Service
from dentalclinic.models._fields import PlainText

class ServiceCreate(BaseModel):
    name: PlainText
    price: Decimal = Field(..., ge=0)

    def to_model(self) -> Service:
        return Service(name=self.name, price=self.price)

class ServiceOut(BaseModel):
    id: int
    name: str
    price: Decimal

    model_config = ConfigDict(from_attributes=True)
