import mimetypes
import time
from pathlib import Path
from typing import Dict

from .models import FileData, ProcessingResult, TaskKind


MAX_CHARS = 50_000
SUPPORTED_EXTENSIONS = (".txt", ".md", ".json", ".csv")


def is_blank(text: str | None) -> bool:
    return not text or not text.strip()


def load_text_file(path: str, max_chars: int = MAX_CHARS) -> FileData:
    """
    Read an uploaded text document as UTF-8.
    Content longer than max_chars is cut and flagged as truncated.
    """
    file_path = Path(path)
    if file_path.suffix.lower() not in SUPPORTED_EXTENSIONS:
        raise ValueError(
            f"Unsupported file type '{file_path.suffix}'. "
            f"Supported: {', '.join(SUPPORTED_EXTENSIONS)}"
        )

    # Undecodable bytes become U+FFFD rather than failing the upload.
    content = file_path.read_text(encoding="utf-8", errors="replace")
    truncated = len(content) > max_chars
    if truncated:
        content = content[:max_chars]

    mime_type, _ = mimetypes.guess_type(file_path.name)
    return FileData(
        name=file_path.name,
        content=content,
        type=mime_type or "text/plain",
        truncated=truncated,
    )


def truncation_warning(max_chars: int = MAX_CHARS) -> str:
    return f"File too large. Content truncated to {max_chars:,} characters."


def download_filename(kind: TaskKind, timestamp_ms: int) -> str:
    return f"amzgaro_{kind.value}_{timestamp_ms}.txt"


def save_result(result: ProcessingResult, output_dir: str, timestamp_ms: int | None = None) -> Dict[str, str]:
    """
    Write each populated output of a result to its own UTF-8 text file.
    Returns a mapping of output kind to file path.
    """
    if not result.ok:
        raise ValueError("Cannot save a failed result.")

    out_dir = Path(output_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    stamp = timestamp_ms if timestamp_ms is not None else int(time.time() * 1000)

    saved: Dict[str, str] = {}
    for kind in TaskKind:
        text = result.get(kind)
        if text is None:
            continue
        path = out_dir / download_filename(kind, stamp)
        with open(path, "w", encoding="utf-8") as f:
            f.write(text)
        saved[kind.value] = str(path)
    return saved
