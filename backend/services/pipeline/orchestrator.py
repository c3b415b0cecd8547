"""Pipeline orchestrator: scrape -> prompt -> Gemini -> validated result.

Flow:
    AnalyzeRequest(job_title, resume_text)
      ├─ _validate(request)                    → ValidationFailure (no calls made)
      ├─ source.fetch_market_data(job_title)   → market snippet | ScrapeFailure
      ├─ build_prompt(job_title, resume, snippet)
      ├─ model.request_analysis(prompt)        → raw text | ModelFailure
      └─ extract_result(raw text)              → SkillAnalysisResult | MalformedResponse

Stages run strictly in order and the first failure ends the run. Nothing is
cached between runs, so identical requests hit both upstreams again.
"""

import logging

from config import Settings
from models.requests import AnalyzeRequest
from models.responses import SkillAnalysisResult
from services.firecrawl_client import FirecrawlClient
from services.gemini_client import GeminiClient
from services.pipeline.base import AnalysisModel, MarketDataSource
from services.pipeline.errors import PipelineError, ValidationFailure
from services.prompt_builder import build_prompt
from services.response_parser import extract_result

logger = logging.getLogger(__name__)


class SkillGapPipeline:
    def __init__(
        self,
        source: MarketDataSource,
        model: AnalysisModel,
        language: str = "Korean",
    ) -> None:
        self.source = source
        self.model = model
        self.language = language

    @staticmethod
    def _validate(request: AnalyzeRequest) -> None:
        missing = []
        if not request.job_title.strip():
            missing.append("jobTitle")
        if not request.resume_text.strip():
            missing.append("myResume")
        if missing:
            raise ValidationFailure(f"{' and '.join(missing)} required")

    async def run_analysis(self, request: AnalyzeRequest) -> SkillAnalysisResult:
        """Run both stages for one request.

        Raises:
            PipelineError: one of ValidationFailure, ScrapeFailure,
                ModelFailure or MalformedResponse.
        """
        self._validate(request)

        try:
            logger.info("1/2: scraping market data for %r", request.job_title)
            snippet = await self.source.fetch_market_data(request.job_title)
            logger.info("1/2: scrape succeeded (%d chars)", len(snippet))

            prompt = build_prompt(
                request.job_title, request.resume_text, snippet, language=self.language
            )

            logger.info("2/2: requesting analysis")
            raw_output = await self.model.request_analysis(prompt)
            result = extract_result(raw_output)
            logger.info(
                "2/2: analysis succeeded (%d skills, %d gaps)",
                len(result.my_skills),
                len(result.skill_gaps),
            )
            return result
        except PipelineError as e:
            logger.warning("Pipeline failed at %s stage: %s", e.stage, e.message)
            raise


def build_pipeline(settings: Settings) -> SkillGapPipeline:
    """Wire the Firecrawl and Gemini adapters; fails fast on missing config."""
    settings.require_pipeline_settings()
    return SkillGapPipeline(
        source=FirecrawlClient(settings),
        model=GeminiClient(settings),
        language=settings.analysis_language,
    )
