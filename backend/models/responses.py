from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ProjectSuggestion(_CamelModel):
    title: str
    description: str


class SkillAnalysisResult(_CamelModel):
    """Structured comparison of a resume against scraped market demand.

    Every field is required: a model answer missing any of them is rejected
    as a whole rather than filled with defaults.
    """

    my_skills: list[str]
    skill_gaps: list[str]
    summary: str
    project_suggestions: list[ProjectSuggestion]


class ErrorResponse(BaseModel):
    error: str
    stage: str
