from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

DEFAULT_PAGE_SIZE = 100


@dataclass
class DatasetConfig:
    """
    Parsed config entry for a single dataset.
    """
    raw: Dict[str, Any]
    source_path: Path
    index: int

    @property
    def key(self) -> str:
        return str(self.raw.get("key") or self.source_path.stem)

    @property
    def label(self) -> str:
        return self.raw.get("label", f"Dataset {self.index}")

    @property
    def path(self) -> Path:
        return Path(self.raw["file"])

    @classmethod
    def from_raw(cls, raw: Dict[str, Any], source_path: Path, index: int) -> DatasetConfig:
        return cls(raw=raw, source_path=source_path, index=index)


@dataclass
class GlobalConfig:
    ui_title: str
    default_dataset: Optional[str] = None
    data_root: Optional[Path] = None
    page_size: int = DEFAULT_PAGE_SIZE
    datasets: List[DatasetConfig] = field(default_factory=list)
