"""Unit tests for request composition."""
import pytest

from motarjjim.composer import compose_tasks
from motarjjim.models import InputPayload, ProcessingOptions, SummaryType, TaskKind
from motarjjim.prompts import SUMMARY_STYLES, SYSTEM_INSTRUCTION

URL = "https://youtube.com/watch?v=abc"


@pytest.mark.parametrize("is_url", [False, True])
def test_no_options_yields_no_tasks(is_url):
    payload = InputPayload(URL if is_url else "Hello world", is_url_mode=is_url)
    options = ProcessingOptions(translate=False, summarize=False)

    assert compose_tasks(payload, options) == []


def test_text_translation_task():
    payload = InputPayload("Hello world", is_url_mode=False)
    tasks = compose_tasks(payload, ProcessingOptions(translate=True, summarize=False))

    assert len(tasks) == 1
    task = tasks[0]
    assert task.kind is TaskKind.TRANSLATION
    assert task.use_search_tool is False
    assert '"""\nHello world\n"""' in task.prompt
    assert "Maintain the original formatting" in task.prompt


def test_text_translation_embeds_source_verbatim():
    source = "  Line one {with braces}\n\n- item 1\n- item 2\n"
    tasks = compose_tasks(InputPayload(source), ProcessingOptions())

    assert source in tasks[0].prompt


def test_url_translation_uses_search_tool():
    tasks = compose_tasks(InputPayload(URL, is_url_mode=True), ProcessingOptions())

    assert len(tasks) == 1
    assert tasks[0].use_search_tool is True
    assert f"URL: {URL}" in tasks[0].prompt
    assert "search for the transcript" in tasks[0].prompt
    assert "Output ONLY the Arabic translation" in tasks[0].prompt


def test_url_mode_is_not_derived_from_content():
    # A URL submitted as text stays a text task.
    tasks = compose_tasks(InputPayload(URL, is_url_mode=False), ProcessingOptions())

    assert tasks[0].use_search_tool is False
    assert "Text to translate" in tasks[0].prompt


def test_both_options_translation_first():
    options = ProcessingOptions(translate=True, summarize=True, summary_type=SummaryType.DETAILED)
    tasks = compose_tasks(InputPayload(URL, is_url_mode=True), options)

    assert [task.kind for task in tasks] == [TaskKind.TRANSLATION, TaskKind.SUMMARY]
    assert all(task.use_search_tool for task in tasks)


def test_summary_only():
    options = ProcessingOptions(translate=False, summarize=True)
    tasks = compose_tasks(InputPayload("Some text"), options)

    assert [task.kind for task in tasks] == [TaskKind.SUMMARY]
    assert "concise, brief" in tasks[0].prompt
    assert "Text to summarize" in tasks[0].prompt


@pytest.mark.parametrize("is_url", [False, True])
def test_summary_styles_differ_only_in_descriptor(is_url):
    payload = InputPayload(URL if is_url else "Some text", is_url_mode=is_url)
    concise = compose_tasks(
        payload, ProcessingOptions(translate=False, summarize=True, summary_type=SummaryType.CONCISE)
    )[0]
    detailed = compose_tasks(
        payload, ProcessingOptions(translate=False, summarize=True, summary_type=SummaryType.DETAILED)
    )[0]

    assert concise.prompt != detailed.prompt
    assert concise.prompt.replace(
        SUMMARY_STYLES[SummaryType.CONCISE], SUMMARY_STYLES[SummaryType.DETAILED]
    ) == detailed.prompt
    assert concise.use_search_tool == detailed.use_search_tool == is_url


def test_every_task_carries_fixed_system_instruction():
    options = ProcessingOptions(translate=True, summarize=True)
    for payload in (InputPayload("text"), InputPayload(URL, is_url_mode=True)):
        for task in compose_tasks(payload, options):
            assert task.system_instruction == SYSTEM_INSTRUCTION
            assert "Modern Standard Arabic" in task.system_instruction


def test_composition_is_deterministic():
    payload = InputPayload("Hello world")
    options = ProcessingOptions(translate=True, summarize=True)

    assert compose_tasks(payload, options) == compose_tasks(payload, options)
