"""Services for linter and AI integration."""

from .ai import AIService
from .linter import LinterService

__all__ = ["LinterService", "AIService"]
