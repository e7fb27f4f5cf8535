"""
Aura learning assistant backend.

A FastAPI proxy between the browser frontend and an OpenAI-compatible
chat-completion gateway.
"""

__version__ = "1.0.0"
