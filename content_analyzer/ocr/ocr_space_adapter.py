import base64
from pathlib import Path
from typing import Any

import httpx

from content_analyzer.ocr.base import BaseOcrClient
from content_analyzer.ocr.exceptions import OcrError


class OcrSpaceAdapter(BaseOcrClient):
    """Recognizes text through the OCR.space parse endpoint."""

    def __init__(
        self,
        *,
        api_url: str,
        api_key: str,
        language: str = "eng",
        timeout_seconds: int = 30,
        http_client: httpx.Client | None = None,
    ) -> None:
        self._api_url = api_url
        self._api_key = api_key
        self._language = language
        self._timeout_seconds = timeout_seconds
        self._client = http_client

    def recognize(self, image_path: Path, mime_type: str) -> str:
        try:
            encoded = base64.b64encode(image_path.read_bytes()).decode("ascii")
        except OSError as exc:
            raise OcrError(f"Failed to read staged image: {exc}") from exc

        form = {
            "apikey": self._api_key,
            "base64Image": f"data:{mime_type};base64,{encoded}",
            "language": self._language,
            "isOverlayRequired": "false",
            "filetype": _file_type(mime_type),
            "detectOrientation": "true",
            "scale": "true",
        }
        try:
            response = self._post(form)
        except httpx.TimeoutException as exc:
            raise OcrError(f"OCR request timed out: {exc}") from exc
        except httpx.HTTPError as exc:
            raise OcrError(f"OCR request failed: {exc}") from exc

        if not response.is_success:
            raise OcrError(f"OCR API request failed: {response.status_code}")
        try:
            payload = response.json()
        except ValueError as exc:
            raise OcrError(f"OCR API returned invalid JSON: {exc}") from exc
        return self._parsed_text(payload)

    def _post(self, form: dict[str, str]) -> httpx.Response:
        if self._client is not None:
            return self._client.post(self._api_url, data=form)
        with httpx.Client(timeout=self._timeout_seconds) as client:
            return client.post(self._api_url, data=form)

    @staticmethod
    def _parsed_text(payload: Any) -> str:
        if not isinstance(payload, dict):
            raise OcrError("OCR API response must be an object")
        if payload.get("IsErroredOnProcessing"):
            raise OcrError(f"OCR processing error: {payload.get('ErrorMessage')}")
        results = payload.get("ParsedResults") or []
        if not isinstance(results, list):
            raise OcrError("OCR API ParsedResults must be a list")
        parts = [
            str(item.get("ParsedText") or "")
            for item in results
            if isinstance(item, dict)
        ]
        return " ".join(parts).strip()


def _file_type(mime_type: str) -> str:
    subtype = mime_type.rsplit("/", 1)[-1].lower()
    return "jpg" if subtype in ("jpeg", "jpg") else subtype
