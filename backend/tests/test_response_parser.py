import json

import pytest

from models.responses import SkillAnalysisResult
from services.pipeline.errors import MalformedResponse, ModelFailure
from services.response_parser import extract_json_object, extract_result, find_object_span

MINIMAL = '{"mySkills":[],"skillGaps":[],"summary":"x","projectSuggestions":[]}'


def test_extracts_object_surrounded_by_text():
    raw = f"Here is the result:\n{MINIMAL}\nThanks!"
    result = extract_result(raw)
    assert result.model_dump(by_alias=True) == json.loads(MINIMAL)


def test_whole_string_json_parses_directly(valid_result):
    result = extract_result(json.dumps(valid_result))
    assert isinstance(result, SkillAnalysisResult)
    assert result.model_dump(by_alias=True) == valid_result


def test_code_fenced_answer_is_accepted(valid_result):
    raw = "```json\n" + json.dumps(valid_result, ensure_ascii=False) + "\n```"
    assert extract_result(raw).skill_gaps == ["Kubernetes", "AWS"]


def test_nested_braces_use_outermost_span(valid_result):
    result = extract_result("prefix " + json.dumps(valid_result) + " suffix")
    assert result.project_suggestions[0].title == "EKS deployment"


def test_korean_prose_survives_unchanged(valid_result):
    data = dict(valid_result, summary="클라우드 경험이 부족합니다.")
    result = extract_result(json.dumps(data, ensure_ascii=False))
    assert result.summary == "클라우드 경험이 부족합니다."


def test_rejects_missing_keys():
    with pytest.raises(MalformedResponse) as exc_info:
        extract_result('{"mySkills":[],"skillGaps":[]}')
    assert "summary" in exc_info.value.message
    assert "projectSuggestions" in exc_info.value.message


def test_rejects_text_without_braces():
    with pytest.raises(MalformedResponse):
        extract_result("no json here")


def test_rejects_closing_brace_before_opening():
    with pytest.raises(MalformedResponse):
        extract_result("} oops {")


def test_rejects_unparseable_span():
    with pytest.raises(MalformedResponse) as exc_info:
        extract_result('Result: {"mySkills": [,]} done')
    assert "invalid JSON" in exc_info.value.message


def test_rejects_wrong_field_types(valid_result):
    data = dict(valid_result, summary=5)
    with pytest.raises(MalformedResponse) as exc_info:
        extract_result(json.dumps(data))
    assert "summary" in exc_info.value.message


def test_rejects_malformed_project_suggestion(valid_result):
    data = dict(valid_result, projectSuggestions=[{"title": "only a title"}])
    with pytest.raises(MalformedResponse):
        extract_result(json.dumps(data))


def test_malformed_response_is_an_analysis_failure():
    with pytest.raises(ModelFailure) as exc_info:
        extract_result("")
    assert exc_info.value.stage == "analysis"


def test_extra_keys_are_ignored(valid_result):
    data = dict(valid_result, confidence=0.9)
    result = extract_result(json.dumps(data))
    assert result.model_dump(by_alias=True) == valid_result


def test_find_object_span():
    assert find_object_span("a {b} c {d} e") == "{b} c {d}"
    assert find_object_span("nothing") is None


def test_extract_json_object_falls_back_when_whole_is_array():
    assert extract_json_object('[{"a": 1}]') == {"a": 1}


def test_deeply_nested_span_is_malformed_not_a_crash():
    raw = 'Result: {"a":' + "[" * 100000 + "]" * 100000 + "}"
    with pytest.raises(MalformedResponse) as exc_info:
        extract_result(raw)
    assert "nested too deeply" in exc_info.value.message


def test_deeply_nested_array_without_object_is_malformed():
    with pytest.raises(MalformedResponse):
        extract_result("[" * 100000 + "]" * 100000)
