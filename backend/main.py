import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from api.errors import pipeline_error_handler, validation_error_handler
from api.router import router
from config import settings
from services.pipeline.errors import PipelineError
from services.pipeline.orchestrator import build_pipeline

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Raises ConfigurationError before the server accepts traffic.
    app.state.pipeline = build_pipeline(settings)
    yield


app = FastAPI(
    title="Skill Gap Analyzer API",
    description="Compares a resume against scraped job market demand",
    version="1.0.0",
    debug=settings.debug,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_exception_handler(PipelineError, pipeline_error_handler)
app.add_exception_handler(RequestValidationError, validation_error_handler)

app.include_router(router)
