from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List

from ..errors import ExtractorError
from .metadata_field import MetadataField


@dataclass
class ExtractionResult:
    path: Path
    fields: List[MetadataField] = field(default_factory=list)
    error: ExtractorError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> dict:
        data: dict = {"path": str(self.path), "ok": self.ok}
        if self.error is not None:
            data["error"] = {"kind": self.error.kind, "message": self.error.message}
        else:
            data["fields"] = [f.to_dict() for f in self.fields]
        return data


@dataclass
class BatchReport:
    results: List[ExtractionResult] = field(default_factory=list)
    canceled: bool = False

    @property
    def succeeded(self) -> List[ExtractionResult]:
        return [r for r in self.results if r.ok]

    @property
    def failed(self) -> List[ExtractionResult]:
        return [r for r in self.results if not r.ok]

    @property
    def total_fields(self) -> int:
        return sum(len(r.fields) for r in self.results)

    def to_dict(self) -> dict:
        return {
            "canceled": self.canceled,
            "succeeded": len(self.succeeded),
            "failed": len(self.failed),
            "results": [r.to_dict() for r in self.results],
        }
