"""
Document analysis prompts.

Both templates ask the model for a single JSON object; the expected shapes are
mirrored by the response models in aura_backend.api.models.analysis.
"""
from enum import Enum
from typing import Optional

DEFAULT_COMPLEXITY = "default"


class AnalysisType(str, Enum):
    """Kinds of document analysis the frontend can request."""

    SYLLABUS = "syllabus"
    STUDY_GUIDE = "studyGuide"


SYLLABUS_PROMPT_TEMPLATE = """
You are an AI assistant specializing in analyzing academic documents for students.
Your task is to analyze the following syllabus text and generate a proactive study plan.
1. Provide a summary of the course. The detail level should match the user's preference: {complexity}.
2. Extract all assignments, exams, and key deadlines.
3. For each major deadline (exam, project), create 1-2 suggested "study reminder" events scheduled 1-2 weeks prior.
4. Return the data as a single, clean JSON object. Do not include any extra text, markdown formatting, or explanations.
The JSON object must have this exact structure: {{ "summary": "...", "keyDates": [{{ "title": "...", "dueDate": "..." }}], "studyPlan": [{{ "title": "...", "dueDate": "..." }}] }}.

Syllabus text follows:
---
{text_content}
"""

STUDY_GUIDE_PROMPT_TEMPLATE = """
You are an AI that creates personalized study guides from user-provided documents.
Analyze the following collection of text. Synthesize all the information and generate a learning module with three sections: Key Concepts, Topic Summary, and Potential Quiz Questions.
The detail level of each section should match the user's preference: {complexity}.
Return the data as a single, clean JSON object. Do not include any extra text, markdown formatting, or explanations.
The JSON object must have this structure: {{ "concepts": "...", "summary": "...", "questions": "..." }}.

Document text follows:
---
{text_content}
"""

ANALYSIS_PROMPT_TEMPLATES = {
    AnalysisType.SYLLABUS: SYLLABUS_PROMPT_TEMPLATE,
    AnalysisType.STUDY_GUIDE: STUDY_GUIDE_PROMPT_TEMPLATE,
}


def build_analysis_prompt(
    analysis_type, text_content: str, complexity: Optional[str] = None
) -> str:
    """
    Render the template for an analysis type.

    Raises:
        ValueError: If analysis_type is not an AnalysisType value
    """
    template = ANALYSIS_PROMPT_TEMPLATES[AnalysisType(analysis_type)]
    return template.format(
        complexity=complexity if complexity is not None else DEFAULT_COMPLEXITY,
        text_content=text_content,
    )
