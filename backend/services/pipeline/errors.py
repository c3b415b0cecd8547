"""Error taxonomy for the skill-gap pipeline.

Each failure carries the stage it came from so callers can branch on the
exception type (or ``stage``) instead of matching message text.
"""


class PipelineError(Exception):
    """Base class for every failure surfaced by the pipeline."""

    stage: str = "pipeline"
    status_code: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationFailure(PipelineError):
    """Caller input was missing or malformed. No upstream call was made."""

    stage = "validation"
    status_code = 400


class ScrapeFailure(PipelineError):
    """The market-data stage failed (network, auth, or empty content)."""

    stage = "scrape"


class ModelFailure(PipelineError):
    """The LLM call failed or returned no answer."""

    stage = "analysis"


class MalformedResponse(ModelFailure):
    """The LLM answered, but not with a valid SkillAnalysisResult."""
