from .models import SummaryType


# Persona and quality rules sent as the system instruction with every request.
SYSTEM_INSTRUCTION = """You are "Amzgaro Motarjjim", a world-class professional translator and linguist specialized in Modern Standard Arabic (MSA).
Your goal is to produce output suitable for academic, literary, and professional use.

**Core Rules:**
1. Translate into high-quality Modern Standard Arabic (Fusha).
2. Strictly preserve the original meaning, tone, and intent.
3. Respect sentence structure and logical flow.
4. Use professional terminology appropriate for the context (e.g., technical, medical, literary).
5. Avoid literal word-for-word translation; prioritize fluency and clarity in Arabic.
6. Ensure correct grammar and diacritics where necessary for ambiguity resolution."""

SUMMARY_STYLES = {
    SummaryType.CONCISE: "concise, brief",
    SummaryType.DETAILED: "detailed, structured",
}

_URL_TRANSLATION_PROMPT = """I will provide a YouTube URL. Please analyze the content of the video (using your search tools or knowledge base) and translate the spoken content or transcript into professional Modern Standard Arabic.

URL: {url}

If you cannot access the specific video content directly, search for the transcript or a detailed summary of this specific video and translate that.
Output ONLY the Arabic translation, with no commentary."""

_TEXT_TRANSLATION_PROMPT = '''Translate the following text into professional Modern Standard Arabic (MSA). Maintain the original formatting (paragraphs, lists).

Text to translate:
"""
{text}
"""'''

_URL_SUMMARY_PROMPT = """Analyze the YouTube video at this URL: {url}. Provide a {style} summary of the content in professional Modern Standard Arabic.

If you cannot access the specific video content directly, search for the transcript or a detailed summary of this specific video and summarize that."""

_TEXT_SUMMARY_PROMPT = '''Provide a {style} summary of the following text in professional Modern Standard Arabic.

Text to summarize:
"""
{text}
"""'''


def translation_prompt(raw_text: str, is_url: bool) -> str:
    if is_url:
        return _URL_TRANSLATION_PROMPT.format(url=raw_text)
    return _TEXT_TRANSLATION_PROMPT.format(text=raw_text)


def summary_prompt(raw_text: str, is_url: bool, summary_type: SummaryType) -> str:
    style = SUMMARY_STYLES[summary_type]
    if is_url:
        return _URL_SUMMARY_PROMPT.format(url=raw_text, style=style)
    return _TEXT_SUMMARY_PROMPT.format(text=raw_text, style=style)
