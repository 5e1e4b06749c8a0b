"""Exam API Client — one coroutine per backend capability over a shared httpx.AsyncClient.

Invariants:
    - Exactly one HTTP request per call: no retries, no timeout, no caching
    - Non-2xx status → HTTPStatusError; body is not read for the envelope
    - Request failures (connect, protocol, content decoding) and unparseable bodies → TransportError (original error chained)
    - Envelope success falsy → ApplicationError (core/envelope.py)
    - Every failure is logged with the operation name, then re-raised
    - test_connection() never raises: any failure becomes False

Design Decisions:
    - One _execute() parameterized by EndpointSpec: the table in core/endpoints.py
      holds path/method/result key/fallback, methods here only build request bodies
    - base_url held by the instance; transport injectable so tests can mount a fake backend
    - Singleton exam_client mirrors the app startup pattern (init_client / get_client)
"""

import logging
from typing import Any

import httpx

from exam_client.core import endpoints
from exam_client.core.endpoints import EndpointSpec
from exam_client.core.envelope import unwrap_envelope
from exam_client.core.errors import (
    ErrorContext, ExamClientError, HTTPStatusError, TransportError,
)
from exam_client.core.domain_types import Operation
from exam_client.config import Settings, get_settings
from exam_client.schemas.exam import (
    OCRTestRequest,
    ParseCSVRequest,
    PerformOCRRequest,
    SearchRequest,
    SetGlobalAnswersRequest,
    to_wire,
)

logger = logging.getLogger(__name__)


class ExamAPIClient:
    """Typed async client for the exam-assistant backend."""

    def __init__(
        self,
        base_url: str,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self._http = httpx.AsyncClient(
            base_url=self.base_url,
            transport=transport,
            timeout=None,
        )

    async def __aenter__(self) -> "ExamAPIClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    # ─── Capabilities ──────────────────────────────────────────

    async def search_answers(
        self, query: str, filters: Any = None,
    ) -> list[dict[str, Any]]:
        """Search the global answer bank. filters defaults to {}."""
        body = SearchRequest(query=query, filters=to_wire(filters) or {})
        return await self._execute(endpoints.SEARCH_ANSWERS, body.to_body())

    async def parse_csv_file(
        self,
        file_path: str,
        encoding: str,
        option_separator: str,
        answer_separator: str,
    ) -> list[dict[str, Any]]:
        """Ask the backend to parse a CSV answer bank on its local disk."""
        body = ParseCSVRequest(
            file_path=file_path,
            encoding=encoding,
            option_separator=option_separator,
            answer_separator=answer_separator,
        )
        return await self._execute(endpoints.PARSE_CSV_FILE, body.to_body())

    async def set_global_answers(self, answers: list[Any]) -> str:
        """Replace the backend's answer bank. Returns the backend's confirmation message."""
        body = SetGlobalAnswersRequest(answers=to_wire(list(answers)))
        return await self._execute(endpoints.SET_GLOBAL_ANSWERS, body.to_body())

    async def get_global_answers(self) -> list[dict[str, Any]]:
        return await self._execute(endpoints.GET_GLOBAL_ANSWERS)

    async def test_ocr_connection(self, config: Any) -> str:
        body = OCRTestRequest(config=to_wire(config))
        return await self._execute(endpoints.TEST_OCR_CONNECTION, body.to_body())

    async def take_screenshot(self) -> str:
        """Capture the screen on the backend host. Returns base64 image data."""
        return await self._execute(endpoints.TAKE_SCREENSHOT)

    async def perform_ocr(self, area: Any, config: Any) -> str:
        body = PerformOCRRequest(area=to_wire(area), config=to_wire(config))
        return await self._execute(endpoints.PERFORM_OCR, body.to_body())

    async def test_connection(self) -> bool:
        """Check reachability via /api/search. True iff the status is 2xx."""
        spec = endpoints.SEARCH_ANSWERS
        body = SearchRequest(query=endpoints.CONNECTION_TEST_QUERY).to_body()
        try:
            response = await self._http.request(
                spec.method.value, spec.path, json=body,
            )
        except Exception as e:
            logger.error(
                f"Connection test failed: {e}",
                extra={
                    "operation": Operation.TEST_CONNECTION.value,
                    "path": spec.path,
                },
            )
            return False

        if not response.is_success:
            logger.warning(
                f"Connection test failed: {response.status_code} {response.reason_phrase}",
                extra={
                    "operation": Operation.TEST_CONNECTION.value,
                    "status_code": response.status_code,
                    "path": spec.path,
                },
            )
            return False
        return True

    # ─── Shared request flow ───────────────────────────────────

    async def _execute(
        self, spec: EndpointSpec, body: dict[str, Any] | None = None,
    ) -> Any:
        """Send one request, validate the envelope, return the result field."""
        context = ErrorContext(
            operation=spec.operation.value,
            method=spec.method.value,
            path=spec.path,
        )
        try:
            response = await self._send(spec, body, context)
            if not response.is_success:
                raise HTTPStatusError(
                    response.status_code, response.reason_phrase, context=context,
                )
            envelope = self._parse_json(response, context)
            result = unwrap_envelope(envelope, spec, context)
        except ExamClientError as e:
            self._log_failure(spec, e)
            raise

        logger.debug(
            f"{spec.operation.value} succeeded",
            extra={
                "operation": spec.operation.value,
                "status_code": response.status_code,
            },
        )
        return result

    async def _send(
        self,
        spec: EndpointSpec,
        body: dict[str, Any] | None,
        context: ErrorContext,
    ) -> httpx.Response:
        """Issue the HTTP call; map any httpx.RequestError to TransportError."""
        kwargs: dict[str, Any] = {}
        if body is not None:
            kwargs["json"] = body
        try:
            return await self._http.request(spec.method.value, spec.path, **kwargs)
        except httpx.RequestError as e:
            detail = str(e) or type(e).__name__
            raise TransportError(
                f"Request to {spec.path} failed: {detail}", context=context,
            ) from e

    def _parse_json(self, response: httpx.Response, context: ErrorContext) -> Any:
        try:
            return response.json()
        except ValueError as e:
            raise TransportError(
                f"Malformed JSON response: {e}", context=context,
            ) from e

    def _log_failure(self, spec: EndpointSpec, error: ExamClientError) -> None:
        logger.error(
            f"{spec.operation.value} failed: {error}",
            extra={
                "operation": spec.operation.value,
                "error_code": error.code,
                "status_code": error.context.status_code,
                "method": spec.method.value,
                "path": spec.path,
            },
        )


def create_client(
    settings: Settings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> ExamAPIClient:
    """Build a client from Settings (environment / .env by default)."""
    settings = settings or get_settings()
    return ExamAPIClient(settings.api_base_url, transport=transport)


# Singleton (initialized by the embedding application)
exam_client: ExamAPIClient | None = None


def init_client(base_url: str, **kwargs) -> ExamAPIClient:
    global exam_client
    exam_client = ExamAPIClient(base_url, **kwargs)
    return exam_client


def get_client() -> ExamAPIClient:
    if not exam_client:
        raise RuntimeError("Exam API client not initialized")
    return exam_client


async def close_client() -> None:
    global exam_client
    if exam_client:
        await exam_client.aclose()
        exam_client = None
