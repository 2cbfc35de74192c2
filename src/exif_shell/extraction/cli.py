from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Sequence

from ..config import LOG_LEVELS, ExtractorSettings
from ..logging_setup import configure_logging
from .exif_metadata_parser import ExifMetadataParser
from .extractor_service import MetadataExtractorService, export_json, write_report
from .image_finder import ImageFinder
from .metadata_reader import MetadataReader

logger = logging.getLogger(__name__)


def parse_args(argv: Sequence[str] | None = None, settings: ExtractorSettings | None = None) -> argparse.Namespace:
    settings = settings or ExtractorSettings()
    parser = argparse.ArgumentParser(description="Print the EXIF fields of image files")
    parser.add_argument("paths", nargs="+", help="Image files or folders to scan")
    parser.add_argument(
        "--workers",
        type=int,
        default=settings.workers,
        help=f"Number of parallel readers (default: {settings.workers})",
    )
    parser.add_argument("--json", help="Optional JSON report path")
    parser.add_argument(
        "--max-binary-bytes",
        type=int,
        default=settings.max_binary_bytes,
        help="Bytes of binary values to show before truncating",
    )
    parser.add_argument("--log-level", choices=LOG_LEVELS, default=settings.log_level)
    parser.add_argument("--log-file", help="Optional rotating log file")
    return parser.parse_args(argv)


def main(argv: List[str] | None = None) -> int:
    settings = ExtractorSettings.from_env()
    args = parse_args(argv, settings)
    configure_logging(args.log_level, Path(args.log_file) if args.log_file else None)

    reader = MetadataReader(ExifMetadataParser(max_binary_bytes=max(0, args.max_binary_bytes)))
    service = MetadataExtractorService(reader, ImageFinder(settings.image_extensions))
    report = service.extract_batch(
        [Path(p) for p in args.paths],
        workers=max(1, args.workers),
    )

    write_report(report, sys.stdout)
    for result in report.failed:
        print(f"{result.path}: {result.error.message}", file=sys.stderr)

    if args.json:
        export_json(report, Path(args.json))
        logger.info("Wrote JSON report to %s", args.json)

    return 1 if report.failed else 0


if __name__ == "__main__":
    sys.exit(main())
