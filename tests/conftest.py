import pytest

from motarjjim.models import ProcessingOptions, SummaryType
from motarjjim.pipeline import ContentProcessingPipeline
from tests.fakes import FakeGenerationService


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    # Keep a developer's .env or shell key out of the tests
    for name in ("GEMINI_API_KEY", "API_KEY", "GEMINI_MODEL", "GEMINI_TIMEOUT", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture()
def fake_service() -> FakeGenerationService:
    return FakeGenerationService()


@pytest.fixture()
def pipeline(fake_service: FakeGenerationService) -> ContentProcessingPipeline:
    return ContentProcessingPipeline(fake_service)


@pytest.fixture()
def both_options() -> ProcessingOptions:
    return ProcessingOptions(translate=True, summarize=True, summary_type=SummaryType.DETAILED)
