from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator

class TodoBase(BaseModel):
    title: str = Field(..., min_length=1)
    completed: Optional[bool] = Field(False)
    order: Optional[int] = Field(None)

    # Blank titles collapse to "" and fail min_length
    model_config = ConfigDict(str_strip_whitespace=True)

    @field_validator("completed", mode="before")
    @classmethod
    def default_completed(cls, v):
        """An explicit null takes the default."""
        return False if v is None else v

class TodoCreate(TodoBase):
    """Payload for POST /todos. Any client-supplied id is dropped with the other unknown fields."""

class TodoUpdate(BaseModel):
    """Payload for PATCH /todos/{id}. A None value leaves the stored field untouched."""

    title: Optional[str] = Field(None, min_length=1)
    completed: Optional[bool] = Field(None)
    order: Optional[int] = Field(None)

    model_config = ConfigDict(str_strip_whitespace=True)

    def changes(self) -> dict:
        return self.model_dump(exclude_none=True)

class TodoResponse(TodoBase):
    id: str
    url: Optional[str] = Field(None, description="Absolute URL of this todo")

    model_config = ConfigDict(from_attributes=True)
