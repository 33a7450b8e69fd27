from typing import Optional

from pydantic import BaseModel, ConfigDict, ValidationInfo, field_validator


class ItemBase(BaseModel):
    name: str
    description: str = ""
    quantity: int
    price: float


class ItemCreate(BaseModel):
    # Missing or null fields decode to zero values so the store reports which rule failed.
    model_config = ConfigDict(strict=True, allow_inf_nan=False)

    name: str = ""
    description: str = ""
    quantity: int = 0
    price: float = 0.0

    @field_validator("name", "description", "quantity", "price", mode="before")
    @classmethod
    def null_as_default(cls, value, info: ValidationInfo):
        if value is None:
            return cls.model_fields[info.field_name].default
        return value


class ItemUpdate(BaseModel):
    model_config = ConfigDict(strict=True, allow_inf_nan=False)

    name: Optional[str] = None
    description: Optional[str] = None
    quantity: Optional[int] = None
    price: Optional[float] = None


class Item(ItemBase):
    id: int
