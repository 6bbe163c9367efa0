"""
Request / response models for the document API.

Field names are snake_case; the camelCase names used by the web form
(includeDay, agendaItems, ...) are accepted as aliases.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from config.constants import DEFAULT_DEPARTMENT, DEFAULT_FONT_SIZE
from docgen import MomRecord, NoticeRecord, parse_multiline_input


class _FormModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)


class NoticeRequest(_FormModel):
    """Notice form data"""
    date: str = ""
    time: str = ""
    venue: str = ""
    agenda: str = ""
    include_day: bool = Field(False, alias="includeDay")
    font: str = "serif"
    size: str = DEFAULT_FONT_SIZE
    extra_blank: bool = Field(False, alias="extraBlank")

    def to_record(self) -> NoticeRecord:
        return NoticeRecord(
            date=self.date,
            time=self.time,
            venue=self.venue,
            agenda=self.agenda,
            include_day=self.include_day,
            font=self.font,
            size=self.size,
            extra_blank=self.extra_blank,
        )


class MomRequest(_FormModel):
    """MOM form data plus the optional AI opt-in"""
    department: str = DEFAULT_DEPARTMENT
    date: str = ""
    time: str = ""
    venue: str = ""
    agenda_items: List[str] = Field(default_factory=list, alias="agendaItems")
    agenda: Optional[str] = Field(None, description="Raw agenda text; one item per line or comma separated")
    discussion: str = ""
    closing_statement: str = Field("", alias="closingStatement")
    include_day: bool = Field(False, alias="includeDay")
    font: str = "serif"
    size: str = DEFAULT_FONT_SIZE
    use_ai: bool = Field(False, alias="useAi")
    provider: Optional[str] = Field(None, description="gemini | openai")
    api_key: Optional[str] = Field(None, alias="apiKey")

    def to_record(self) -> MomRecord:
        items = [item.strip() for item in self.agenda_items if item and item.strip()]
        if not items and self.agenda:
            items = parse_multiline_input(self.agenda)
        return MomRecord(
            department=self.department,
            date=self.date,
            time=self.time,
            venue=self.venue,
            agenda_items=items,
            discussion=self.discussion,
            closing_statement=self.closing_statement,
            include_day=self.include_day,
            font=self.font,
            size=self.size,
        )


class DocumentPayload(BaseModel):
    content: str
    filename: str
    media_type: str


class DocumentsResponse(BaseModel):
    rtf: DocumentPayload
    text: DocumentPayload
    warnings: List[str] = []
    text_source: str = "template"


class ValidationErrorResponse(BaseModel):
    valid: bool = False
    errors: List[str]


class ProviderSummary(BaseModel):
    id: str
    name: str
    description: str
    default_model: str
    models: List[str]
    env_key: str
