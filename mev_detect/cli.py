"""Command-line filter: transaction document in, verdict out.

Usage:
    mev-detect cluster.json
    cat cluster.json | mev-detect
    mev-detect --explain cluster.json
"""

import argparse
import json
import logging
import sys

from mev_detect.api import explain
from mev_detect.config import DetectorConfig, MevDetectConfig
from mev_detect.detection.sandwich import SandwichDetector
from mev_detect.exceptions import ConfigurationError
from mev_detect.logging import setup_logging
from mev_detect.serialization import to_dict

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mev-detect",
        description="Detect a sandwich attack in a JSON transaction cluster",
    )
    parser.add_argument(
        "file",
        nargs="?",
        help="Transaction document (JSON array). Reads stdin when omitted.",
    )
    parser.add_argument(
        "--explain",
        action="store_true",
        help="Print the matched frontrun/victim/backrun and condition flags",
    )
    parser.add_argument("--window", type=int, default=None, help="Max frontrun/backrun gap in seconds")
    parser.add_argument(
        "--min-slippage", type=float, default=None, help="Victim slippage tolerance threshold"
    )
    parser.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING, ERROR")
    parser.add_argument("--log-format", choices=["standard", "json"], default="standard")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = MevDetectConfig.from_env()
        detector_config = DetectorConfig(
            min_cluster_size=config.detector.min_cluster_size,
            max_window_seconds=args.window if args.window is not None else config.detector.max_window_seconds,
            min_slippage_tolerance=(
                args.min_slippage if args.min_slippage is not None
                else config.detector.min_slippage_tolerance
            ),
        )
    except ConfigurationError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    setup_logging(level=args.log_level or config.log_level, format_type=args.log_format)

    if args.file:
        try:
            with open(args.file, "rb") as f:
                document = f.read()
        except OSError as e:
            logger.error("Cannot read %s: %s", args.file, e)
            return 2
    else:
        document = sys.stdin.buffer.read()

    match = explain(document, SandwichDetector(detector_config))
    verdict = match is not None and match.is_attack

    if args.explain:
        print(json.dumps({"sandwich": verdict, "match": to_dict(match) if match else None}, indent=2))
    else:
        print("true" if verdict else "false")
    return 0


if __name__ == "__main__":
    sys.exit(main())
