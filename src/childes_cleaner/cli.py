"""Command-line entry point.

Usage::

    childes-clean --input data/xml-files/Suppes/Nina --output data
    childes-clean --input data/xml-files/Brown/Eve --speaker MOT --lenient
    childes-clean --config configs/nina.yaml
"""

from __future__ import annotations

import argparse
import logging
import sys

from .config import CleanerConfig, load_config
from .corpus import CorpusCleaner
from .exceptions import CorpusCleanerError
from .stream import DEFAULT_SPEAKER


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="childes-clean",
        description="Normalize CHILDES XML transcripts into one utterance per line",
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--config", help="Path to run config YAML")
    source.add_argument("--input", help="Directory of transcript XML files")
    parser.add_argument("--output", help="Output directory (default: data)")
    parser.add_argument("--name", help="Output file name stem (default: input dir name)")
    parser.add_argument(
        "--speaker",
        help=f"Speaker role to collect, e.g. CHI or MOT (default: {DEFAULT_SPEAKER})",
    )
    parser.add_argument(
        "--lenient",
        action="store_true",
        help="Skip malformed word fragments instead of failing",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every dropped utterance")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # Flags given next to --config override the file.
    overrides: dict[str, object] = {
        key: value
        for key, value in (
            ("output_dir", args.output),
            ("name", args.name),
            ("speaker", args.speaker),
        )
        if value is not None
    }
    if args.lenient:
        overrides["strict"] = False

    try:
        if args.config:
            config = load_config(args.config, overrides)
        else:
            config = CleanerConfig.from_dict({"input_dir": args.input, **overrides})
        out = CorpusCleaner(config).run()
    except (CorpusCleanerError, FileNotFoundError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(f"Cleaned utterances written to {out}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
