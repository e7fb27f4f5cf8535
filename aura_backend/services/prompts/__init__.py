from .analysis_prompts import (
    AnalysisType,
    ANALYSIS_PROMPT_TEMPLATES,
    build_analysis_prompt,
)
from .chat_prompts import (
    AURA_SYSTEM_PROMPT,
    COMPLEX_STYLE_PROMPT,
    SIMPLIFIED_STYLE_PROMPT,
    build_system_instruction,
)
from .media_prompts import (
    TRANSCRIPT_PROMPT_TEMPLATE,
    build_transcript_prompt,
)

__all__ = [
    "AnalysisType",
    "ANALYSIS_PROMPT_TEMPLATES",
    "build_analysis_prompt",
    "AURA_SYSTEM_PROMPT",
    "COMPLEX_STYLE_PROMPT",
    "SIMPLIFIED_STYLE_PROMPT",
    "build_system_instruction",
    "TRANSCRIPT_PROMPT_TEMPLATE",
    "build_transcript_prompt",
]
