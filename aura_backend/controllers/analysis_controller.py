"""
Controller for document analysis.

Handles syllabus analysis and study-guide generation: picks the template for
the requested analysis type, asks upstream for a JSON object and validates
the result against the matching response model.
"""
import logging
from typing import Union

from aura_backend.api.models.analysis import (
    ANALYSIS_RESPONSE_MODELS,
    AnalysisRequest,
    StudyGuide,
    SyllabusAnalysis,
)
from aura_backend.services.arcade import ArcadeClient, validate_payload
from aura_backend.services.prompts import build_analysis_prompt

logger = logging.getLogger(__name__)


class AnalysisController:
    """Controller for document analysis operations."""

    def __init__(self, client: ArcadeClient):
        self.client = client

    async def analyze_documents(
        self, request: AnalysisRequest
    ) -> Union[SyllabusAnalysis, StudyGuide]:
        """
        Analyze document text according to the requested analysis type.

        Raises:
            GatewayError: If the upstream call fails or returns the wrong shape
        """
        prompt = build_analysis_prompt(
            request.analysis_type,
            text_content=request.text_content,
            complexity=request.complexity,
        )
        logger.info(
            f"Analyzing {len(request.text_content)} characters as {request.analysis_type.value}"
        )
        data = await self.client.complete_json(prompt)
        return validate_payload(data, ANALYSIS_RESPONSE_MODELS[request.analysis_type])
