from pydantic import BaseModel, Field
from typing import Optional, List
from pydantic.config import ConfigDict

from sheets_table.codec import FIELD_TYPES


# --- Form fields ---
class FormField(BaseModel):
    id: Optional[str] = None
    label: Optional[str] = None
    type: Optional[str] = Field(default=None, description=f"One of: {', '.join(FIELD_TYPES)}")
    required: Optional[bool] = None
    options: Optional[List[str]] = None
    model_config = ConfigDict(extra="ignore")


class FormFieldsRead(BaseModel):
    form_fields: List[FormField] = Field(default_factory=list, alias="formFields")
    model_config = ConfigDict(populate_by_name=True)


class MessageOut(BaseModel):
    message: str


class ErrorOut(MessageOut):
    error: Optional[str] = None


# --- System ---
class SheetsSettingsRead(BaseModel):
    configured: bool
    spreadsheet_id: str
    range: str
    credentials_kind: str
