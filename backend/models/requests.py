from pydantic import BaseModel, ConfigDict, Field


class AnalyzeRequest(BaseModel):
    """Inbound body of POST /api/analyze.

    Both fields default to "" so that absent keys reach the pipeline's own
    validation and come back as a ValidationFailure instead of a 422.
    """

    model_config = ConfigDict(populate_by_name=True)

    job_title: str = Field("", alias="jobTitle", max_length=200, description="Target job title")
    resume_text: str = Field(
        "", alias="myResume", max_length=50000, description="Plain text resume content"
    )
