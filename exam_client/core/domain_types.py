"""Domain Types — enums that replace bare strings across the client.

Invariants:
    - Operation values are the public capability names used in logs and error context
    - HttpMethod values are the exact verbs sent on the wire
    - All error kinds encoded as ErrorKind — no string matching on messages

Design Decisions:
    - str Enums: serialize to JSON log records without custom encoders
"""

from enum import Enum


class Operation(str, Enum):
    """One member per backend capability."""
    SEARCH_ANSWERS = "search_answers"
    PARSE_CSV_FILE = "parse_csv_file"
    SET_GLOBAL_ANSWERS = "set_global_answers"
    GET_GLOBAL_ANSWERS = "get_global_answers"
    TEST_OCR_CONNECTION = "test_ocr_connection"
    TAKE_SCREENSHOT = "take_screenshot"
    PERFORM_OCR = "perform_ocr"
    TEST_CONNECTION = "test_connection"


class HttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"


class ErrorKind(str, Enum):
    """Where a call failed: below HTTP, at the status line, or inside the envelope."""
    TRANSPORT = "transport"
    HTTP_STATUS = "http_status"
    APPLICATION = "application"
