from collections.abc import Callable

import httpx
import pytest

from content_analyzer.config.settings import Settings
from content_analyzer.ocr.ocr_space_adapter import OcrSpaceAdapter

OcrHandler = Callable[[httpx.Request], httpx.Response]


@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        enrichment_api_key="",
        enrichment_credential_files=[],
        enrichment_api_key_env_var="CONTENT_ANALYZER_TEST_KEY",
    )


@pytest.fixture
def ocr_client_factory() -> Callable[[OcrHandler], OcrSpaceAdapter]:
    def build(handler: OcrHandler) -> OcrSpaceAdapter:
        return OcrSpaceAdapter(
            api_url="https://ocr.test/parse/image",
            api_key="test",
            http_client=httpx.Client(transport=httpx.MockTransport(handler)),
        )

    return build
