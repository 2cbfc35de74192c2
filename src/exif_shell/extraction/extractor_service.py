from __future__ import annotations

import json
import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path
from typing import Callable, Dict, Iterable, List, TextIO

from ..errors import ExtractorError
from ..models.extraction_result import BatchReport, ExtractionResult
from .image_finder import ImageFinder
from .metadata_reader import MetadataReader

logger = logging.getLogger(__name__)


class MetadataExtractorService:
    def __init__(
        self,
        reader: MetadataReader | None = None,
        finder: ImageFinder | None = None,
    ) -> None:
        self.reader = reader or MetadataReader()
        self.finder = finder or ImageFinder()

    def extract_one(self, path: Path) -> ExtractionResult:
        try:
            fields = self.reader.read(path)
        except ExtractorError as exc:
            logger.warning("Skipping %s: %s", path, exc.message)
            return ExtractionResult(path=path, error=exc)
        except Exception as exc:
            logger.exception("Unexpected error reading %s", path)
            return ExtractionResult(
                path=path, error=ExtractorError(path, str(exc) or type(exc).__name__)
            )
        return ExtractionResult(path=path, fields=fields)

    def extract_batch(
        self,
        paths: Iterable[Path],
        on_progress: Callable[[int, int, Path], None] | None = None,
        workers: int = 1,
        cancel_check: Callable[[], bool] | None = None,
    ) -> BatchReport:
        """Read every path and collect a report in input order.

        A failing path becomes a failed result; the rest of the batch runs.
        """
        targets = list(self.finder.expand(paths))
        total = len(targets)
        report = BatchReport()

        def should_cancel() -> bool:
            return bool(cancel_check and cancel_check())

        if workers > 1 and total > 0:
            executor = ThreadPoolExecutor(max_workers=workers)
            futures = {
                executor.submit(self.extract_one, path): idx
                for idx, path in enumerate(targets)
            }
            finished: Dict[int, ExtractionResult] = {}
            try:
                for future in as_completed(futures):
                    if should_cancel():
                        report.canceled = True
                        break
                    idx = futures[future]
                    finished[idx] = future.result()
                    if on_progress:
                        on_progress(len(finished), total, targets[idx])
            finally:
                executor.shutdown(wait=not report.canceled, cancel_futures=True)
            report.results = [finished[idx] for idx in sorted(finished)]
        else:
            for idx, path in enumerate(targets, start=1):
                if should_cancel():
                    report.canceled = True
                    break
                report.results.append(self.extract_one(path))
                if on_progress:
                    on_progress(idx, total, path)

        logger.info(
            "Extracted %d fields from %d of %d files (%d failed%s)",
            report.total_fields,
            len(report.succeeded),
            total,
            len(report.failed),
            ", canceled" if report.canceled else "",
        )
        return report


def report_lines(report: BatchReport) -> List[str]:
    lines: List[str] = []
    for result in report.succeeded:
        lines.extend(f.to_line() for f in result.fields)
    return lines


def write_report(report: BatchReport, stream: TextIO) -> int:
    count = 0
    for line in report_lines(report):
        stream.write(line + "\n")
        count += 1
    return count


def export_json(report: BatchReport, json_path: Path) -> None:
    json_path.parent.mkdir(parents=True, exist_ok=True)
    json_path.write_text(
        json.dumps(report.to_dict(), ensure_ascii=False, indent=2), encoding="utf-8"
    )
