"""
Request and response models for document analysis.
"""
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from aura_backend.services.prompts import AnalysisType


class AnalysisRequest(BaseModel):
    """Request model for document analysis.

    - textContent: Extracted text of the uploaded document(s)
    - complexity: Detail level preference, interpolated into the prompt
    - analysisType: "syllabus" or "studyGuide"
    """
    model_config = ConfigDict(populate_by_name=True)

    text_content: str = Field(..., alias="textContent")
    complexity: Optional[str] = None
    analysis_type: AnalysisType = Field(..., alias="analysisType")


class DatedItem(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    title: str
    due_date: str = Field(..., alias="dueDate")


class SyllabusAnalysis(BaseModel):
    """Course summary, extracted deadlines and suggested study reminders."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    summary: str
    key_dates: List[DatedItem] = Field(..., alias="keyDates")
    study_plan: List[DatedItem] = Field(..., alias="studyPlan")


class StudyGuide(BaseModel):
    """Learning module generated from a collection of documents.

    Models sometimes return the sections as lists rather than strings;
    both are accepted and passed through unchanged.
    """
    model_config = ConfigDict(extra="allow")

    concepts: Union[str, List[str]]
    summary: Union[str, List[str]]
    questions: Union[str, List[str]]


ANALYSIS_RESPONSE_MODELS = {
    AnalysisType.SYLLABUS: SyllabusAnalysis,
    AnalysisType.STUDY_GUIDE: StudyGuide,
}
