import logging
import re
from typing import Dict, Protocol

import google.generativeai as genai
from google.generativeai import protos
from google.generativeai.types import BlockedPromptException, StopCandidateException

from .config import AppConfig
from .errors import MissingCredentialsError


logger = logging.getLogger(__name__)

# Gemini 1.x grounds with search retrieval; 2.x and later use the google_search tool.
LEGACY_SEARCH_TOOL = "google_search_retrieval"
_LEGACY_MODEL = re.compile(r"^(models/)?gemini-1\.")

BLOCKED_FINISH_REASONS = {"SAFETY", "BLOCKLIST", "PROHIBITED_CONTENT", "SPII"}


def search_tool_for(model_name: str):
    if _LEGACY_MODEL.match(model_name):
        return LEGACY_SEARCH_TOOL
    return [protos.Tool(google_search=protos.Tool.GoogleSearch())]


def response_text(response) -> str:
    """
    Text of a generate_content response, or "" when it carries no parts.

    ``response.text`` raises on a partless candidate; only a prompt or
    candidate blocked by policy is an error here.
    """
    feedback = response.prompt_feedback
    if feedback and feedback.block_reason:
        raise BlockedPromptException(feedback)

    candidates = list(response.candidates)
    if not candidates:
        return ""
    candidate = candidates[0]
    if not candidate.content.parts:
        reason = getattr(candidate.finish_reason, "name", str(candidate.finish_reason))
        if reason in BLOCKED_FINISH_REASONS:
            raise StopCandidateException(candidate)
        return ""
    return response.text or ""


class GenerationService(Protocol):
    def generate(self, prompt: str, system_instruction: str, use_search_tool: bool = False) -> str:
        ...


class GeminiClient:
    """Thin wrapper around the Gemini Python SDK for this translator."""

    def __init__(self, config: AppConfig) -> None:
        self._api_key = config.gemini_api_key
        self._model_name = config.gemini_model
        self._timeout = config.request_timeout
        self._models: Dict[str, genai.GenerativeModel] = {}
        if self._api_key:
            genai.configure(api_key=self._api_key)

    @property
    def model_name(self) -> str:
        return self._model_name

    def _model_for(self, system_instruction: str) -> genai.GenerativeModel:
        model = self._models.get(system_instruction)
        if model is None:
            model = genai.GenerativeModel(self._model_name, system_instruction=system_instruction)
            self._models[system_instruction] = model
        return model

    def generate(self, prompt: str, system_instruction: str, use_search_tool: bool = False) -> str:
        """
        Run a single generation request and return the response text.

        The search tool is attached only when requested. A response with no
        text yields ""; a policy block raises.
        """
        if not self._api_key:
            raise MissingCredentialsError(
                "GEMINI_API_KEY is not set. Please add it to your environment or .env file."
            )

        model = self._model_for(system_instruction)
        logger.debug(
            "Calling %s (search_tool=%s, prompt_chars=%d)", self._model_name, use_search_tool, len(prompt)
        )
        response = model.generate_content(
            prompt,
            tools=search_tool_for(self._model_name) if use_search_tool else None,
            request_options={"timeout": self._timeout},
        )
        return response_text(response)
