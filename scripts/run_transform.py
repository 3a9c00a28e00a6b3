"""
Command-line driver: convert a file (or stdin) with edi-transform.

Usage:
    python scripts/run_transform.py inputs/order.txt --to json
    python scripts/run_transform.py inputs/order.json --to string --segment "|" --element "^"
    cat order.xml | python scripts/run_transform.py - --from xml --to string
    python scripts/run_transform.py inputs/order.txt --to xml --config options.yaml

The source format is detected from the payload unless --from is given.
Exit codes: 0 on success, 2 for bad input/options, 1 for internal failures.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import edi_transform
from edi_transform import EdiTransformError, is_client_error

# ---------------------------------------------------------------------------
# Logging setup
# ---------------------------------------------------------------------------

logging.basicConfig(
    level=logging.WARNING,
    format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
    datefmt="%H:%M:%S",
    stream=sys.stderr,
)
log = logging.getLogger("run_transform")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__.split("\n\n")[0].strip())
    parser.add_argument("input", help="Input file path, or '-' for stdin")
    parser.add_argument("--to", dest="target", required=True,
                        choices=edi_transform.supported_formats(),
                        help="Output format")
    parser.add_argument("--from", dest="source", default=None,
                        help="Input format (default: detect from payload)")
    parser.add_argument("--segment", dest="segment_delineator", default=None,
                        help="Segment delimiter for the string format")
    parser.add_argument("--element", dest="element_delineator", default=None,
                        help="Element delimiter for the string format")
    parser.add_argument("--config", default=None,
                        help="YAML options file with default delimiters")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Log pipeline steps")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    if args.verbose:
        logging.getLogger().setLevel(logging.INFO)

    try:
        if args.input == "-":
            payload = sys.stdin.read()
        else:
            payload = Path(args.input).read_bytes()

        options = edi_transform.resolve_options(
            {
                "segment_delineator": args.segment_delineator,
                "element_delineator": args.element_delineator,
            },
            edi_transform.load_options(args.config) if args.config else None,
        )
        result = edi_transform.transform(
            payload, target=args.target, source=args.source, options=options
        )
    except EdiTransformError as exc:
        log.error("%s: %s", type(exc).__name__, exc)
        return 2 if is_client_error(exc) else 1
    except OSError as exc:
        log.error("%s: %s", type(exc).__name__, exc)
        return 2

    sys.stdout.write(result)
    if not result.endswith("\n"):
        sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
