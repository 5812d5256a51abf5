"""
Services package for the relay application.

Contains:
- pdf_service: PDF text extraction
- ai: OpenAI chat-completion prompts and calls
"""

from .ai import AIService
from .pdf_service import PDFService

__all__ = ["PDFService", "AIService"]
