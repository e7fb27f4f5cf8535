from .analysis import AnalysisRequest, DatedItem, StudyGuide, SyllabusAnalysis
from .chat import ChatRequest, ChatResponse
from .config import ApiKeys, ClientConfig
from .error import ErrorResponse
from .media import Transcript, TranscriptionRequest

__all__ = [
    "ErrorResponse",
    "AnalysisRequest",
    "DatedItem",
    "StudyGuide",
    "SyllabusAnalysis",
    "ChatRequest",
    "ChatResponse",
    "ApiKeys",
    "ClientConfig",
    "Transcript",
    "TranscriptionRequest",
]
