"""Custom field definition entities."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field, model_validator


class FieldType(str, Enum):
    """Supported custom attribute types."""

    TEXT = "text"
    NUMBER = "number"
    DATE = "date"
    SELECT = "select"


class FieldDefinition(BaseModel):
    """Metadata describing one custom attribute on batches."""

    id: str | None = None
    name: str = Field(..., min_length=1)
    type: FieldType = FieldType.TEXT
    options: list[str] | None = None  # select only
    created_at: datetime | None = None

    @model_validator(mode="after")
    def check_select_options(self) -> "FieldDefinition":
        if self.type is FieldType.SELECT and not self.options:
            raise ValueError("select fields require at least one option")
        if self.type is not FieldType.SELECT:
            self.options = None
        return self
