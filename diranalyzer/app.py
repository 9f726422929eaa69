from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import List, Optional

from . import __version__
from .errors import AnalysisError
from .images import PROBERS, make_prober
from .limits import DEFAULT_MAX_OPEN_FILES, limit_open_files
from .report import format_json, format_report
from .scanner import analyze_dir

log = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_USAGE = 2

def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="diranalyzer",
        description="Report file, word, image and vacant-directory statistics for a directory tree.",
    )
    p.add_argument("n", metavar="N", type=int,
                   help="how many words and images to report")
    p.add_argument("directory", help="directory to analyze")
    p.add_argument("--prober", choices=sorted(PROBERS), default="identify",
                   help="how to detect images (default: identify, from ImageMagick)")
    p.add_argument("--no-follow-symlinks", dest="follow_symlinks", action="store_false",
                   help="skip symbolic links instead of following them")
    p.add_argument("--max-open-files", type=int, default=DEFAULT_MAX_OPEN_FILES,
                   help=f"cap on open file descriptors (default: {DEFAULT_MAX_OPEN_FILES}; 0 leaves it alone)")
    p.add_argument("--json", action="store_true", help="print the results as JSON")
    p.add_argument("--human", action="store_true", help="print byte sizes in KB/MB/GB")
    p.add_argument("-v", "--verbose", action="count", default=0,
                   help="log progress to stderr (-vv for debug)")
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return p

def setup_logging(verbosity: int):
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, stream=sys.stderr,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

def run(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    if args.max_open_files > 0:
        limit_open_files(args.max_open_files)

    try:
        os.chdir(args.directory)
    except OSError as exc:
        log.error("cannot enter %s: %s", args.directory, exc)
        parser.print_usage()
        return EXIT_USAGE

    try:
        res = analyze_dir(args.n, prober=make_prober(args.prober),
                          follow_symlinks=args.follow_symlinks)
    except AnalysisError as exc:
        log.error("%s", exc)
        if exc.__cause__ is not None:
            log.debug("cause: %s", exc.__cause__)
        return EXIT_FAILED

    write_out(format_json(res) if args.json else format_report(res, human=args.human))
    return EXIT_OK

def write_out(text: str):
    # paths keep undecodable filename bytes as lone surrogates; emit them raw
    out = sys.stdout
    data = (text + "\n").encode(out.encoding or "utf-8", "surrogateescape")
    out.flush()
    out.buffer.write(data)
    out.buffer.flush()

def main():
    sys.exit(run())
