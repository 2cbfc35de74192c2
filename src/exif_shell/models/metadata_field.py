from __future__ import annotations

from dataclasses import dataclass
from typing import Any

PRIMARY_IFD = 0
THUMBNAIL_IFD = 1


@dataclass(frozen=True)
class MetadataField:
    tag: int
    tag_name: str
    ifd: int
    group: str
    value: Any
    display: str

    def to_line(self) -> str:
        return f"{self.tag_name} {self.ifd} {self.display}"

    def to_dict(self) -> dict:
        return {
            "tag": self.tag,
            "tag_name": self.tag_name,
            "ifd": self.ifd,
            "group": self.group,
            "display": self.display,
        }
