"""Exception handlers mapping pipeline errors to {"error", "stage"} bodies."""

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from models.responses import ErrorResponse
from services.pipeline.errors import PipelineError, ValidationFailure


def _render(exc: PipelineError) -> JSONResponse:
    body = ErrorResponse(error=exc.message, stage=exc.stage)
    return JSONResponse(status_code=exc.status_code, content=body.model_dump())


async def pipeline_error_handler(_: Request, exc: PipelineError) -> JSONResponse:
    return _render(exc)


async def validation_error_handler(_: Request, exc: RequestValidationError) -> JSONResponse:
    """Request-schema errors use the same contract as ValidationFailure."""
    fields = sorted(
        {
            ".".join(p for p in err["loc"][1:] if isinstance(p, str)) or "body"
            for err in exc.errors()
        }
    )
    return _render(ValidationFailure(f"Invalid request payload: {', '.join(fields)}"))
