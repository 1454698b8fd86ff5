"""Command line interface for building the speech table and charts."""
from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import Optional

from .config import load_config
from .reporting import load_party_affiliation, records_to_frame
from .runtime import create_pipeline

LOGGER = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Lexical statistics for presidential annual messages")
    parser.add_argument("command", choices=["table", "charts"], help="Which action to execute")
    parser.add_argument("--config", type=Path, help="Path to an explicit configuration file")
    parser.add_argument("--catalog", help="Catalog page to read document links from")
    parser.add_argument("--limit", type=int, help="Maximum number of documents to analyse")
    parser.add_argument("--workers", type=int, help="Number of worker threads for fetching and analysis")
    parser.add_argument(
        "--exclude",
        action="append",
        default=[],
        metavar="IDENTIFIER",
        help="Document identifier to skip (may be given several times)",
    )
    parser.add_argument("--output", type=Path, help="Write the table as CSV to this file ('table' only)")
    parser.add_argument("--output-dir", type=Path, help="Directory for chart images ('charts' only)")
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")
    parser = _build_parser()
    args = parser.parse_args(argv)
    config = load_config(args.config)
    if args.workers is not None:
        config.analysis = replace(config.analysis, max_workers=args.workers)

    resources = create_pipeline(config, extra_exclusions=args.exclude)
    try:
        records = resources.pipeline.run(args.catalog, limit=args.limit)
    finally:
        resources.close()
    frame = records_to_frame(records, resources.rules.labels)

    if args.command == "table":
        if args.output:
            frame.to_csv(args.output)
            LOGGER.info("Wrote %s rows to %s", len(frame), args.output)
        else:
            frame.to_csv(sys.stdout)
        return 0
    if args.command == "charts":
        from .reporting.charts import render_charts

        party_path = Path(config.report.party_path) if config.report.party_path else None
        written = render_charts(
            frame,
            args.output_dir or Path(config.report.output_dir),
            year_threshold=config.report.year_threshold,
            affiliation=load_party_affiliation(party_path),
            labels=[rule.label for rule in resources.rules.token_rules],
        )
        LOGGER.info("Rendered %s charts", len(written))
        return 0
    parser.error(f"Unknown command {args.command}")
    return 2


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    raise SystemExit(main())
