"""Abstract interfaces for the two upstream stages of the pipeline."""

from abc import ABC, abstractmethod


class MarketDataSource(ABC):
    """Stage 1: turns a job title into a (truncated) market snippet.

    Implementations make exactly one upstream call per invocation and raise
    ScrapeFailure on any failure, including an empty result.
    """

    @abstractmethod
    async def fetch_market_data(self, job_title: str) -> str:
        """Return scraped market text for ``job_title``."""


class AnalysisModel(ABC):
    """Stage 2: runs the comparison prompt through an LLM.

    Implementations make exactly one upstream call per invocation and raise
    ModelFailure on any failure, including an empty answer.
    """

    @abstractmethod
    async def request_analysis(self, prompt: str) -> str:
        """Return the model's raw text answer."""
