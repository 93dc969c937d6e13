from typing import Optional

from pydantic import BaseModel, ConfigDict


class CategorySummary(BaseModel):
    id: int
    name: str

    model_config = ConfigDict(from_attributes=True)


class CategoryRead(CategorySummary):
    description: Optional[str] = None
