"""Command-line entry point for LegitMate predictions."""
import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Optional

from config.settings import settings
from legitmate.exceptions import InvalidJobInputError, PredictionError
from legitmate.logging_config import setup_logging
from legitmate.pipeline import BackendResolver, PredictionContext
from legitmate.validators import validate_job, validate_link

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_INVALID = 2


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="legitmate",
        description="Check a job posting for signs of fraud.",
    )
    parser.add_argument(
        "--api-base",
        default=None,
        help="Custom prediction API base URL (overrides LEGITMATE_API_BASE)",
    )
    parser.add_argument("--api-key", default=None, help="Account API key for the hosted service")
    parser.add_argument(
        "--strategy",
        choices=["quick", "full"],
        default=None,
        help="Local fallback heuristic",
    )
    parser.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING or ERROR")

    subparsers = parser.add_subparsers(dest="command", required=True)

    predict = subparsers.add_parser("predict", help="Score a job posting from its fields")
    predict.add_argument("--title", required=True)
    predict.add_argument("--company", default="")
    predict.add_argument("--location", default=None)
    predict.add_argument("--department", default=None)
    description = predict.add_mutually_exclusive_group(required=True)
    description.add_argument("--description")
    description.add_argument("--description-file", type=Path)

    link = subparsers.add_parser("predict-link", help="Score a job posting from its URL")
    link.add_argument("url")

    bulk = subparsers.add_parser("predict-bulk", help="Score a CSV or JSON file of postings")
    bulk.add_argument("file", type=Path)

    return parser


async def run(args: argparse.Namespace) -> int:
    """Run one CLI command and print the result as JSON."""
    overrides = {}
    if args.strategy:
        overrides["local_scoring_strategy"] = args.strategy
    app_settings = settings.model_copy(update=overrides)

    context = PredictionContext(
        api_base=args.api_base if args.api_base is not None else app_settings.api_base,
        api_key=args.api_key or app_settings.api_key,
    )
    resolver = BackendResolver.from_settings(app_settings)

    try:
        if args.command == "predict":
            text = (
                args.description_file.read_text()
                if args.description_file
                else args.description
            )
            job = validate_job(
                {
                    "title": args.title,
                    "company": args.company,
                    "location": args.location,
                    "department": args.department,
                    "description": text,
                }
            )
            output = (await resolver.predict(job, context)).to_dict()
        elif args.command == "predict-link":
            url = validate_link(args.url)
            output = (await resolver.predict_link(url, context)).to_dict()
        else:
            results = await resolver.predict_bulk(args.file, context)
            output = [r.to_dict() for r in results]
    except InvalidJobInputError as e:
        for message in e.errors:
            logger.error("Invalid input: %s", message)
        return EXIT_INVALID
    except (PredictionError, OSError) as e:
        logger.error("Prediction failed: %s", e)
        return EXIT_FAILED

    print(json.dumps(output, indent=2))
    return EXIT_OK


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    setup_logging(
        level=args.log_level or settings.log_level,
        log_file=settings.log_file,
        fmt=settings.log_format,
    )
    try:
        return asyncio.run(run(args))
    except KeyboardInterrupt:
        logger.info("Interrupted.")
        return EXIT_FAILED


if __name__ == "__main__":
    sys.exit(main())
