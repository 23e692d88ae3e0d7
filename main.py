import argparse
import sys
from typing import List

from motarjjim.config import load_config
from motarjjim.gemini_client import GeminiClient
from motarjjim.io_utils import is_blank, load_text_file, save_result, truncation_warning
from motarjjim.log import setup_logging
from motarjjim.models import InputMode, ProcessingOptions, SummaryType, TaskKind
from motarjjim.pipeline import ContentProcessingPipeline


def parse_args(argv: List[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Professional Arabic translation & summarization using Gemini."
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--text", help="Text to translate or summarize.")
    source.add_argument(
        "--file",
        help="Path to a text document (.txt, .md, .json, .csv). Truncated to 50,000 characters.",
    )
    source.add_argument(
        "--url",
        help="YouTube video URL (e.g. https://www.youtube.com/watch?v=...).",
    )
    parser.add_argument(
        "--no-translate",
        dest="translate",
        action="store_false",
        help="Skip the Modern Standard Arabic translation.",
    )
    parser.add_argument(
        "--summarize",
        action="store_true",
        help="Also generate a summary in Modern Standard Arabic.",
    )
    parser.add_argument(
        "--summary-type",
        choices=["concise", "detailed"],
        default="concise",
        help="Summary style when --summarize is set.",
    )
    parser.add_argument(
        "--output-dir",
        default=None,
        help="If set, save each output as a text file in this directory.",
    )
    return parser.parse_args(argv)


def main(argv: List[str] | None = None) -> int:
    args = parse_args(argv)
    cfg = load_config()
    setup_logging(cfg.log_level)

    mode = InputMode.YOUTUBE if args.url else InputMode.TEXT
    if args.file:
        try:
            data = load_text_file(args.file)
        except (OSError, ValueError) as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return 2
        if data.truncated:
            print(truncation_warning(), file=sys.stderr)
        raw_text = data.content
    else:
        raw_text = args.url if args.url else args.text

    options = ProcessingOptions(
        translate=args.translate,
        summarize=args.summarize,
        summary_type=SummaryType[args.summary_type.upper()],
    )

    if is_blank(raw_text):
        print("Error: input is empty.", file=sys.stderr)
        return 2
    if not options.has_output():
        print("Error: nothing to do, enable translation or --summarize.", file=sys.stderr)
        return 2

    pipeline = ContentProcessingPipeline(GeminiClient(cfg))
    result = pipeline.process(raw_text, mode.is_url, options)

    if not result.ok:
        print(f"Processing Error: {result.error}", file=sys.stderr)
        return 1

    for kind in TaskKind:
        text = result.get(kind)
        if text is None:
            continue
        print(f"\n=== {kind.value.capitalize()} ===")
        print(text)

    if args.output_dir:
        saved = save_result(result, args.output_dir)
        print("\nSaved:")
        for key, value in saved.items():
            print(f"- {key}: {value}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
