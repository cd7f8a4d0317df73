from __future__ import annotations

import logging
from pathlib import Path
from typing import List

import pandas as pd

from facet_browser.config.loader import resolve_dataset_path
from facet_browser.config.model import DatasetConfig, GlobalConfig
from facet_browser.core.dataset import Dataset
from facet_browser.core.exceptions import SourceUnavailable

logger = logging.getLogger(__name__)


def load_csv(path: Path, name: str) -> Dataset:
    """
    Read a headered CSV into a fully-built Dataset.

    Every cell is kept as a string; header names and cells are stripped of
    surrounding whitespace and missing trailing cells become "". Surplus
    cells on a row are dropped, and the row itself is kept.

    :raises SourceUnavailable: if the file is missing, empty or unparsable.
    """
    truncated: List[int] = []

    try:
        n_columns = len(pd.read_csv(path, nrows=0).columns)

        def _truncate(fields: List[str]) -> List[str]:
            truncated.append(len(fields))
            return fields[:n_columns]

        frame = pd.read_csv(
            path,
            dtype=str,
            keep_default_na=False,
            skipinitialspace=True,
            skip_blank_lines=True,
            index_col=False,
            engine="python",
            on_bad_lines=_truncate,
        )
    except FileNotFoundError as e:
        raise SourceUnavailable(f"CSV file not found at {path}") from e
    except pd.errors.EmptyDataError as e:
        raise SourceUnavailable(f"CSV file at {path} is empty") from e
    except (pd.errors.ParserError, UnicodeDecodeError, OSError) as e:
        raise SourceUnavailable(f"Could not parse CSV file at {path}: {e}") from e

    if truncated:
        logger.warning(
            "Dropped surplus cells from CSV rows",
            extra={"dataset": name, "path": str(path), "n_rows": len(truncated), "expected": n_columns},
        )

    frame.columns = [str(c).strip() for c in frame.columns]
    for col in frame.columns:
        frame[col] = frame[col].fillna("").astype(str).str.strip()

    return Dataset.from_frame(frame, name=name)


def from_config(cfg: DatasetConfig, global_config: GlobalConfig) -> Dataset:
    """
    Materialise a CSV-backed Dataset from a DatasetConfig.
    """
    path = resolve_dataset_path(cfg, global_config)

    if not path.is_file():
        raise SourceUnavailable(f"Dataset '{cfg.key}': CSV file not found at {path}.")

    dataset = load_csv(path, name=cfg.key)

    logger.info(
        "Dataset loaded",
        extra={
            "dataset": cfg.key,
            "path": str(path),
            "n_rows": dataset.n_rows,
            "columns": {c.key: c.kind.value for c in dataset.columns},
        },
    )
    return dataset
