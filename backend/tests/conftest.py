"""Shared test configuration, fakes for both upstream stages."""

import copy
import json

import pytest

from config import Settings
from services.pipeline.base import AnalysisModel, MarketDataSource

VALID_RESULT = {
    "mySkills": ["Java", "Spring Boot", "MySQL"],
    "skillGaps": ["Kubernetes", "AWS"],
    "summary": "Solid backend fundamentals; cloud tooling is missing.",
    "projectSuggestions": [
        {"title": "EKS deployment", "description": "Deploy a Spring Boot app to Kubernetes on AWS."},
        {"title": "Infra as code", "description": "Provision the stack with Terraform."},
    ],
}


class FakeSource(MarketDataSource):
    def __init__(self, snippet: str = "Java Spring Kubernetes AWS", error: Exception | None = None):
        self.snippet = snippet
        self.error = error
        self.calls: list[str] = []

    async def fetch_market_data(self, job_title: str) -> str:
        self.calls.append(job_title)
        if self.error is not None:
            raise self.error
        return self.snippet


class FakeModel(AnalysisModel):
    def __init__(self, answer: str | None = None, error: Exception | None = None):
        self.answer = json.dumps(VALID_RESULT) if answer is None else answer
        self.error = error
        self.prompts: list[str] = []

    async def request_analysis(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.answer


@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        _env_file=None,
        firecrawl_api_key="fc-test",
        firecrawl_api_url="https://firecrawl.test/v0/scrape",
        gemini_api_key="gm-test",
        gemini_model="gemini-test",
        market_data_max_chars=50,
        request_timeout_seconds=5.0,
    )


@pytest.fixture
def valid_result() -> dict:
    return copy.deepcopy(VALID_RESULT)


@pytest.fixture
def source() -> FakeSource:
    return FakeSource()


@pytest.fixture
def model() -> FakeModel:
    return FakeModel()
