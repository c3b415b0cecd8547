"""Pull a SkillAnalysisResult out of free-form model output.

Parse attempts, in order:
    1. the whole (stripped) text as JSON
    2. the greedy outer-brace span, from the first '{' to the last '}'

Models sometimes wrap the object in a preamble, a closing remark or code
fences; step 2 tolerates that as long as one well-formed object sits inside.
"""

import json
import logging

from pydantic import ValidationError

from models.responses import SkillAnalysisResult
from services.pipeline.errors import MalformedResponse

logger = logging.getLogger(__name__)

REQUIRED_KEYS = ("mySkills", "skillGaps", "summary", "projectSuggestions")


def _try_whole(text: str) -> dict | None:
    try:
        parsed = json.loads(text)
    except (json.JSONDecodeError, RecursionError):
        return None
    return parsed if isinstance(parsed, dict) else None


def find_object_span(text: str) -> str | None:
    """Return text[first '{' : last '}'] inclusive, or None."""
    start = text.find("{")
    end = text.rfind("}")
    if start == -1 or end < start:
        return None
    return text[start : end + 1]


def extract_json_object(raw_output: str) -> dict:
    """Locate and decode the JSON object embedded in ``raw_output``."""
    text = raw_output.strip()
    whole = _try_whole(text)
    if whole is not None:
        return whole

    span = find_object_span(text)
    if span is None:
        logger.error("No JSON object in model output (%d chars)", len(raw_output))
        raise MalformedResponse("AI analysis failed: no JSON object found in the model answer")

    try:
        parsed = json.loads(span)
    except json.JSONDecodeError as e:
        logger.error("Model output JSON did not parse: %s", e)
        logger.debug("Unparseable span: %s", span)
        raise MalformedResponse(f"AI analysis failed: invalid JSON in the model answer ({e.msg})") from e
    except RecursionError as e:
        logger.error("Model output JSON nested too deeply (%d chars)", len(span))
        raise MalformedResponse("AI analysis failed: the model answer is nested too deeply") from e

    if not isinstance(parsed, dict):
        raise MalformedResponse("AI analysis failed: the model answer is not a JSON object")
    return parsed


def extract_result(raw_output: str) -> SkillAnalysisResult:
    """Decode and validate the model answer; no partial results."""
    data = extract_json_object(raw_output)

    missing = [key for key in REQUIRED_KEYS if key not in data]
    if missing:
        logger.error("Model answer missing keys: %s", missing)
        raise MalformedResponse(
            f"AI analysis failed: the model answer is missing {', '.join(missing)}"
        )

    try:
        return SkillAnalysisResult.model_validate({key: data[key] for key in REQUIRED_KEYS})
    except ValidationError as e:
        fields = sorted({".".join(str(p) for p in err["loc"]) for err in e.errors()})
        logger.error("Model answer has invalid fields: %s", fields)
        raise MalformedResponse(
            f"AI analysis failed: invalid fields in the model answer ({', '.join(fields)})"
        ) from e
