import logging
from typing import List

from .models import GenerationTask, InputPayload, ProcessingOptions, TaskKind
from .prompts import SYSTEM_INSTRUCTION, summary_prompt, translation_prompt


logger = logging.getLogger(__name__)


def compose_tasks(payload: InputPayload, options: ProcessingOptions) -> List[GenerationTask]:
    """
    Turn one input and its output options into the generation tasks to run.

    Translation comes first, then summary. A URL can only be processed by
    letting the model retrieve external content, so URL-mode tasks always
    request the search tool. Disabled options produce no task, so both
    disabled yields an empty list.
    """
    is_url = payload.is_url_mode
    tasks: List[GenerationTask] = []

    if options.translate:
        tasks.append(
            GenerationTask(
                kind=TaskKind.TRANSLATION,
                prompt=translation_prompt(payload.raw_text, is_url),
                use_search_tool=is_url,
                system_instruction=SYSTEM_INSTRUCTION,
            )
        )

    if options.summarize:
        tasks.append(
            GenerationTask(
                kind=TaskKind.SUMMARY,
                prompt=summary_prompt(payload.raw_text, is_url, options.summary_type),
                use_search_tool=is_url,
                system_instruction=SYSTEM_INSTRUCTION,
            )
        )

    logger.debug(
        "Composed %d task(s): %s (url_mode=%s)",
        len(tasks),
        ", ".join(task.kind.value for task in tasks) or "none",
        is_url,
    )
    return tasks
