from dataclasses import dataclass
from enum import Enum
from typing import Dict


class InputMode(Enum):
    TEXT = "TEXT"
    YOUTUBE = "YOUTUBE"

    @property
    def is_url(self) -> bool:
        return self is InputMode.YOUTUBE


class SummaryType(Enum):
    CONCISE = "CONCISE"
    DETAILED = "DETAILED"


class TaskKind(Enum):
    TRANSLATION = "translation"
    SUMMARY = "summary"


@dataclass
class ProcessingOptions:
    translate: bool = True
    summarize: bool = False
    summary_type: SummaryType = SummaryType.CONCISE

    def has_output(self) -> bool:
        return self.translate or self.summarize


@dataclass(frozen=True)
class InputPayload:
    """Source text, or a single video URL when ``is_url_mode`` is set."""

    raw_text: str
    is_url_mode: bool = False


@dataclass(frozen=True)
class GenerationTask:
    kind: TaskKind
    prompt: str
    use_search_tool: bool
    system_instruction: str


@dataclass
class ProcessingResult:
    translation: str | None = None
    summary: str | None = None
    error: str | None = None

    @classmethod
    def success(cls, outputs: Dict[TaskKind, str]) -> "ProcessingResult":
        return cls(
            translation=outputs.get(TaskKind.TRANSLATION),
            summary=outputs.get(TaskKind.SUMMARY),
        )

    @classmethod
    def failure(cls, message: str) -> "ProcessingResult":
        return cls(error=message)

    @property
    def ok(self) -> bool:
        return self.error is None

    def get(self, kind: TaskKind) -> str | None:
        return self.translation if kind is TaskKind.TRANSLATION else self.summary

    def to_dict(self) -> Dict[str, str]:
        data = {
            "translation": self.translation,
            "summary": self.summary,
            "error": self.error,
        }
        return {key: value for key, value in data.items() if value is not None}


@dataclass
class FileData:
    name: str
    content: str
    type: str
    truncated: bool = False
