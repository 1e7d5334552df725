import uuid
from datetime import datetime
from pydantic import BaseModel


class UserRead(BaseModel):
    """Schema for reading the caller's account."""
    id: uuid.UUID
    email: str
    name: str
    created_at: datetime

    model_config = {"from_attributes": True}
