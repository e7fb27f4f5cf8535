"""
Document analysis endpoint.

Turns uploaded document text into either a syllabus study plan or a study
guide, returned as the JSON object produced by the model.
"""
from typing import Union

from fastapi import APIRouter, Depends, status

from aura_backend.api.dependencies import get_analysis_controller
from aura_backend.api.models import AnalysisRequest, ErrorResponse, StudyGuide, SyllabusAnalysis
from aura_backend.controllers import AnalysisController

# ============================================================================
# Router
# ============================================================================

router = APIRouter()


# ============================================================================
# Endpoints
# ============================================================================


@router.post(
    "/analyze-documents",
    status_code=status.HTTP_200_OK,
    response_model=Union[SyllabusAnalysis, StudyGuide],
    responses={
        400: {"model": ErrorResponse, "description": "Invalid request or unknown analysisType"},
        500: {"model": ErrorResponse, "description": "Upstream error or malformed model output"},
    },
)
async def analyze_documents(
    request: AnalysisRequest,
    controller: AnalysisController = Depends(get_analysis_controller),
) -> Union[SyllabusAnalysis, StudyGuide]:
    """
    Analyze document text.

    - syllabus: returns summary, keyDates and studyPlan
    - studyGuide: returns concepts, summary and questions
    """
    return await controller.analyze_documents(request)
