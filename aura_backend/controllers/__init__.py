from .analysis_controller import AnalysisController
from .chat_controller import ChatController
from .media_controller import MediaController

__all__ = [
    "AnalysisController",
    "ChatController",
    "MediaController",
]
