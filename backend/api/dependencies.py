"""Shared dependencies for API routes."""

from fastapi import Request

from services.pipeline.orchestrator import SkillGapPipeline


def get_pipeline(request: Request) -> SkillGapPipeline:
    """Pipeline built once by the app lifespan."""
    return request.app.state.pipeline
