"""
Command-line entry point for the flight control frame monitor.

Reads frames as hex strings, one per line, from a file or stdin. Each frame is
run through `process_frame` and its FrameReport is written to stdout as one
JSON line. Blank lines and lines starting with '#' are skipped.

Exit status is 0 when every frame was accepted, 1 when any frame was rejected
or unparseable, and 2 when the frame definition could not be loaded.
"""

import argparse
import logging
import sys
from typing import Iterable, Iterator, Optional, Sequence, Tuple

from fcs_decoder import FrameSpecError, load_frame_spec
from fcs_monitor._version import VERSION
from fcs_monitor.config import configure_logger, get_actual_spec_path
from fcs_monitor.frame_processing import process_frame

logger = logging.getLogger(__name__)


def iter_hex_frames(lines: Iterable[str]) -> Iterator[Tuple[int, Optional[bytes]]]:
    """
    Yield ``(line_number, frame)`` for every non-blank, non-comment line.

    Whitespace inside a line is ignored, so both ``AF0A01..`` and ``AF 0A 01 ..``
    are accepted. ``frame`` is None when the line is not valid hex.
    """
    for line_number, line in enumerate(lines, start=1):
        text = "".join(line.split())
        if not text or text.startswith("#"):
            continue
        try:
            yield line_number, bytes.fromhex(text)
        except ValueError:
            logger.warning(f"Line {line_number}: not a hex frame, skipped")
            yield line_number, None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fcs-monitor",
        description="Validate, decode and convert hex-encoded flight control frames.",
    )
    parser.add_argument(
        "input",
        nargs="?",
        type=argparse.FileType("r"),
        default="-",
        help="File with one hex frame per line (default: stdin)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Set the logging level (default: LOG_LEVEL or INFO)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logger(args.log_level)

    try:
        spec = load_frame_spec(get_actual_spec_path())
    except FrameSpecError as e:
        logger.error(f"Cannot load frame definition: {e}")
        return 2

    source_name = getattr(args.input, "name", "<stdin>")
    failures = 0
    with args.input:
        for line_number, frame in iter_hex_frames(args.input):
            if frame is None:
                failures += 1
                continue
            report = process_frame(frame, source=f"{source_name}:{line_number}", spec=spec)
            if not report.ok:
                failures += 1
            print(report.model_dump_json())

    logger.debug(f"Finished reading {source_name}: {failures} frame(s) failed")
    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
