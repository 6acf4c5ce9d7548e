from datetime import datetime
from typing import Annotated, List, Optional, Union

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field
from pydantic.alias_generators import to_camel

# MongoDB ObjectIds travel as their hex string
ObjectIdStr = Annotated[str, BeforeValidator(str)]


class CamelModel(BaseModel):
    """Base model whose wire and storage field names are camelCase."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# --- Analysis Models ---

class KeyProject(CamelModel):
    """A significant project pulled from the resume."""
    name: str = Field(..., description="Project name.")
    description: str = Field(..., description="Brief project description.")


class AnalysisQuestion(CamelModel):
    """A candidate interview question together with why it is relevant."""
    question: str = Field(..., description="The interview question.")
    context: Optional[str] = Field(default=None, description="Why this question is relevant to the resume.")


class ResumeAnalysis(CamelModel):
    """Structured result the AI collaborator derives from resume text."""
    technical_skills: List[str] = Field(default_factory=list)
    years_experience: Union[int, float] = Field(default=0, description="Total years of experience (0 if unclear).")
    key_projects: List[KeyProject] = Field(default_factory=list)
    technical_questions: List[AnalysisQuestion] = Field(default_factory=list)
    behavioral_questions: List[AnalysisQuestion] = Field(default_factory=list)


# --- Resume Records ---

class ResumeCreate(CamelModel):
    """Body of POST /api/resumes."""
    content: str = Field(..., min_length=1, description="Raw extracted resume text.")
    analysis: Optional[ResumeAnalysis] = None
    user_id: Optional[str] = None


class Resume(CamelModel):
    """A persisted resume."""
    id: ObjectIdStr = Field(..., alias="_id")
    user_id: Optional[str] = None
    content: str
    analysis: Optional[ResumeAnalysis] = None
    created_at: datetime
    updated_at: datetime


class ExtractedText(BaseModel):
    """Response of POST /api/extract-text."""
    text: str
