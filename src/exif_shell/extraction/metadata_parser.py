from __future__ import annotations

from typing import List, Protocol

from ..models.metadata_field import MetadataField


class MetadataParser(Protocol):
    def parse(self, data: bytes) -> List[MetadataField]:
        ...
