from pydantic import BaseModel, ConfigDict


class UserSummary(BaseModel):
    """Public projection of a listing owner. Never carries credentials."""

    id: int
    name: str
    email: str

    model_config = ConfigDict(from_attributes=True)
