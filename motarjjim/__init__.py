"""
Core package for the Amzgaro Motarjjim translator.

This package exposes composable building blocks:
- Gemini client wrapper
- Prompt construction and request composition
- Content processing orchestration (translation + summary)
- File loading and result download helpers
"""

from .composer import compose_tasks
from .config import AppConfig, load_config
from .errors import GENERIC_ERROR_MESSAGE, ErrorKind, ProcessingError
from .gemini_client import GeminiClient, GenerationService
from .models import (
    GenerationTask,
    InputMode,
    InputPayload,
    ProcessingOptions,
    ProcessingResult,
    SummaryType,
    TaskKind,
)
from .pipeline import ContentProcessingPipeline

__all__ = [
    "AppConfig",
    "ContentProcessingPipeline",
    "ErrorKind",
    "GENERIC_ERROR_MESSAGE",
    "GeminiClient",
    "GenerationService",
    "GenerationTask",
    "InputMode",
    "InputPayload",
    "ProcessingError",
    "ProcessingOptions",
    "ProcessingResult",
    "SummaryType",
    "TaskKind",
    "compose_tasks",
    "load_config",
]
