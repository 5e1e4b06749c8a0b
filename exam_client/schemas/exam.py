"""Exam Schemas — request bodies and item shapes exchanged with the backend.

Invariants:
    - Request models dump with by_alias=True to the exact camelCase keys the backend reads
    - SearchRequest.filters defaults to {} (never omitted from the body)
    - Item models accept both camelCase (wire) and snake_case (Python) field names
    - Unknown fields on item models are preserved (extra="allow") so round-trips are lossless

Design Decisions:
    - Nested request values are typed Any and sent as given; typed items are converted
      with to_wire() first
    - alias_generator=to_camel over per-field aliases: one rule, matches the Go json tags
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _WireModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="allow",
    )


# --- Items --------------------------------------------------------------------

class AnswerItem(_WireModel):
    """One question in the answer bank."""
    type: str = ""
    question: str = ""
    options: list[str] | None = Field(default_factory=list)
    answer: list[str] | None = Field(default_factory=list)


class SearchResult(_WireModel):
    """One scored match returned by /api/search."""
    item: AnswerItem
    score: float = 0.0
    matched: str = ""
    question_matches: list[int] | None = None
    option_matches: dict[str, list[int]] | None = None
    answer_matches: list[int] | None = None


class AccuracyFilters(_WireModel):
    """Score bands: high ≥80%, medium 50–79%, low <50%."""
    high: bool = False
    medium: bool = False
    low: bool = False


class SearchFilters(_WireModel):
    accuracy_filters: AccuracyFilters = Field(default_factory=AccuracyFilters)


class OCRConfig(_WireModel):
    """OCR engine settings forwarded verbatim to the backend."""
    mode: Literal["online", "local"] = "online"
    url: str = ""
    api_key: str = ""
    status: str = ""


class ScreenshotArea(_WireModel):
    """Screen rectangle in pixels; image is optional base64 PNG data."""
    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0
    image: str = ""


def to_wire(value: Any) -> Any:
    """Dump pydantic models (also inside lists) to their camelCase wire form."""
    if isinstance(value, BaseModel):
        return value.model_dump(by_alias=True, mode="json")
    if isinstance(value, (list, tuple)):
        return [to_wire(v) for v in value]
    return value


# --- Requests -----------------------------------------------------------------

class _RequestModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_body(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, mode="json")


class SearchRequest(_RequestModel):
    query: str
    filters: Any = Field(default_factory=dict)


class ParseCSVRequest(_RequestModel):
    file_path: str
    encoding: str
    option_separator: str
    answer_separator: str


class SetGlobalAnswersRequest(_RequestModel):
    answers: list[Any]


class OCRTestRequest(_RequestModel):
    config: Any


class PerformOCRRequest(_RequestModel):
    area: Any
    config: Any
