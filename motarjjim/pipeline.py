import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Dict, List

from .composer import compose_tasks
from .errors import GENERIC_ERROR_MESSAGE, ProcessingError, classify_error
from .gemini_client import GenerationService
from .models import (
    GenerationTask,
    InputPayload,
    ProcessingOptions,
    ProcessingResult,
    TaskKind,
)


logger = logging.getLogger(__name__)

PLACEHOLDERS = {
    TaskKind.TRANSLATION: "Could not generate translation.",
    TaskKind.SUMMARY: "Could not generate summary.",
}


def _execute_task(service: GenerationService, task: GenerationTask) -> str:
    text = service.generate(
        task.prompt,
        task.system_instruction,
        use_search_tool=task.use_search_tool,
    )
    if not text or not text.strip():
        logger.warning("Empty %s response, using placeholder", task.kind.value)
        return PLACEHOLDERS[task.kind]
    return text


class ContentProcessingPipeline:
    def __init__(self, service: GenerationService, max_workers: int = 2) -> None:
        self._service = service
        self._max_workers = max(1, max_workers)

    def run(self, raw_text: str, is_url_mode: bool, options: ProcessingOptions) -> ProcessingResult:
        """
        Orchestrate one processing cycle:
        - compose the translation / summary tasks
        - issue one generation call per task, in parallel
        - collect all results, or fail the whole cycle on the first error

        Raises ProcessingError carrying only the generic message; the
        underlying error is logged and chained as ``__cause__``.
        """
        payload = InputPayload(raw_text=raw_text, is_url_mode=is_url_mode)
        tasks: List[GenerationTask] = compose_tasks(payload, options)
        if not tasks:
            logger.info("No output option selected, nothing to process")
            return ProcessingResult()

        logger.info(
            "Processing %s input with %d task(s)",
            "URL" if is_url_mode else "text",
            len(tasks),
        )
        outputs: Dict[TaskKind, str] = {}
        max_workers = min(self._max_workers, len(tasks))
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            future_to_task = {
                executor.submit(_execute_task, self._service, task): task
                for task in tasks
            }
            for future in as_completed(future_to_task):
                task = future_to_task[future]
                try:
                    outputs[task.kind] = future.result()
                except Exception as exc:
                    for pending in future_to_task:
                        pending.cancel()
                    kind = classify_error(exc)
                    logger.error(
                        "Gemini API error during %s task (%s): %s",
                        task.kind.value,
                        kind.value,
                        exc,
                        exc_info=exc,
                    )
                    raise ProcessingError(kind) from exc
                logger.info("Finished %s task", task.kind.value)

        return ProcessingResult.success(outputs)

    def process(self, raw_text: str, is_url_mode: bool, options: ProcessingOptions) -> ProcessingResult:
        """Same as ``run`` but reports failure on the result instead of raising."""
        try:
            return self.run(raw_text, is_url_mode, options)
        except ProcessingError as exc:
            return ProcessingResult.failure(exc.message or GENERIC_ERROR_MESSAGE)
