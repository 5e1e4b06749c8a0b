"""Endpoint Table — one descriptor per backend capability.

Invariants:
    - Exactly one EndpointSpec per Operation except TEST_CONNECTION (reuses SEARCH_ANSWERS)
    - empty_default is a factory: every call gets a fresh [] / ""
    - fallback_message is used only when the envelope carries no message

Design Decisions:
    - Frozen dataclass + module constants: the table is data, the client holds the flow
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from exam_client.core.domain_types import HttpMethod, Operation


@dataclass(frozen=True)
class EndpointSpec:
    operation: Operation
    method: HttpMethod
    path: str
    result_key: str
    empty_default: Callable[[], Any]
    fallback_message: str


SEARCH_ANSWERS = EndpointSpec(
    Operation.SEARCH_ANSWERS, HttpMethod.POST, "/api/search",
    "results", list, "search failed",
)
PARSE_CSV_FILE = EndpointSpec(
    Operation.PARSE_CSV_FILE, HttpMethod.POST, "/api/parse-csv",
    "results", list, "CSV parse failed",
)
SET_GLOBAL_ANSWERS = EndpointSpec(
    Operation.SET_GLOBAL_ANSWERS, HttpMethod.POST, "/api/set-global-answers",
    "message", str, "set global answers failed",
)
GET_GLOBAL_ANSWERS = EndpointSpec(
    Operation.GET_GLOBAL_ANSWERS, HttpMethod.GET, "/api/get-global-answers",
    "answers", list, "get global answers failed",
)
TEST_OCR_CONNECTION = EndpointSpec(
    Operation.TEST_OCR_CONNECTION, HttpMethod.POST, "/api/test-ocr",
    "result", str, "OCR test failed",
)
TAKE_SCREENSHOT = EndpointSpec(
    Operation.TAKE_SCREENSHOT, HttpMethod.POST, "/api/take-screenshot",
    "image", str, "screenshot failed",
)
PERFORM_OCR = EndpointSpec(
    Operation.PERFORM_OCR, HttpMethod.POST, "/api/perform-ocr",
    "result", str, "OCR execution failed",
)

ENDPOINTS: dict[Operation, EndpointSpec] = {
    spec.operation: spec
    for spec in (
        SEARCH_ANSWERS,
        PARSE_CSV_FILE,
        SET_GLOBAL_ANSWERS,
        GET_GLOBAL_ANSWERS,
        TEST_OCR_CONNECTION,
        TAKE_SCREENSHOT,
        PERFORM_OCR,
    )
}

# Connectivity check — same request as search_answers, fixed query
CONNECTION_TEST_QUERY = "test"
