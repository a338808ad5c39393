from pydantic import BaseModel, Field


class MatchSummaryRequest(BaseModel):
    candidate_id: str | None = Field(default=None, max_length=200, description="Optional caller reference echoed back")
    resume_text: str = Field(default="", max_length=50000, description="Plain text resume content")
    job_description: str = Field(default="", max_length=50000, description="Job description text")
