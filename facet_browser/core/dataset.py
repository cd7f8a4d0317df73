from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

import numpy as np
import pandas as pd

from facet_browser.core.exceptions import ConfigurationError, DatasetSchemaError
from facet_browser.core.type_inference import ColumnKind, format_column_label, infer_column_kind

Row = Dict[str, str]
ConstraintKey = Tuple[Tuple[str, Tuple[str, ...]], ...]


def _cell(value: object) -> str:
    return "" if value is None else str(value)


@dataclass(frozen=True)
class ColumnDescriptor:
    """
    Describes one column of a Dataset.

    - key: column name as it appears in the source header
    - label: human-readable label for the UI
    - kind: NUMBER or TEXT, inferred once at load time
    """
    key: str
    label: str
    kind: ColumnKind


class Dataset:
    """
    Immutable tabular dataset used by the filtering engine.

    Includes:
    - Ordered rows held as a string-typed DataFrame ("" for missing cells)
    - Ordered column descriptors; the first column is the row identifier
    - Cached live-row masks per constraint set
    """

    MAX_MASK_CACHE = 256

    # -------------------------------------------------------------------------
    # Constructors
    # -------------------------------------------------------------------------
    def __init__(
        self,
        name: str,
        frame: pd.DataFrame,
        columns: Sequence[ColumnDescriptor],
    ) -> None:
        keys = [c.key for c in columns]
        if list(frame.columns) != keys:
            raise DatasetSchemaError(
                f"Dataset '{name}': frame columns {list(frame.columns)} don't match descriptors {keys}"
            )

        self.name = name
        self._frame = frame.reset_index(drop=True)
        self._columns: Tuple[ColumnDescriptor, ...] = tuple(columns)
        self._by_key: Dict[str, ColumnDescriptor] = {c.key: c for c in self._columns}

        self._mask_cache: Dict[ConstraintKey, np.ndarray] = {}

    @classmethod
    def from_frame(
        cls,
        frame: pd.DataFrame,
        name: str = "dataset",
    ) -> "Dataset":
        """
        Build a Dataset from any DataFrame. Cells are normalised to str and
        column kinds/labels are inferred here, once.
        """
        frame = frame.copy()
        frame.columns = [str(c) for c in frame.columns]
        frame = frame.fillna("").astype(str)

        columns = [
            ColumnDescriptor(
                key=key,
                label=format_column_label(key),
                kind=infer_column_kind(frame[key].tolist()),
            )
            for key in frame.columns
        ]
        return cls(name=name, frame=frame, columns=columns)

    @classmethod
    def from_records(
        cls,
        records: Iterable[Mapping[str, str]],
        header: Sequence[str],
        name: str = "dataset",
    ) -> "Dataset":
        """
        Build a Dataset from raw rows with a known header order.

        Missing keys become "". A key that isn't in the header is a schema error.
        """
        header = [str(h) for h in header]
        known = set(header)
        rows: List[List[str]] = []

        for idx, record in enumerate(records):
            extra = set(record) - known
            if extra:
                raise DatasetSchemaError(
                    f"Dataset '{name}': row {idx} has keys not in header: {sorted(extra)}"
                )
            rows.append([_cell(record.get(h)) for h in header])

        frame = pd.DataFrame(rows, columns=header, dtype=object)
        return cls.from_frame(frame, name=name)

    @classmethod
    def empty(cls, name: str = "") -> "Dataset":
        """A dataset with no columns and no rows (used when no source is available)."""
        return cls(name=name, frame=pd.DataFrame(), columns=[])

    # -------------------------------------------------------------------------
    # Columns
    # -------------------------------------------------------------------------
    @property
    def columns(self) -> Tuple[ColumnDescriptor, ...]:
        return self._columns

    @property
    def id_column(self) -> Optional[ColumnDescriptor]:
        """The first column, reserved as row identifier."""
        return self._columns[0] if self._columns else None

    @property
    def filterable_columns(self) -> Tuple[ColumnDescriptor, ...]:
        return self._columns[1:]

    @property
    def filterable_keys(self) -> Tuple[str, ...]:
        return tuple(c.key for c in self.filterable_columns)

    def column(self, key: str) -> ColumnDescriptor:
        try:
            return self._by_key[key]
        except KeyError:
            raise ConfigurationError(f"Unknown column '{key}' in dataset '{self.name}'")

    def is_filterable(self, key: str) -> bool:
        return key in self._by_key and key != self._columns[0].key

    # -------------------------------------------------------------------------
    # Rows
    # -------------------------------------------------------------------------
    @property
    def n_rows(self) -> int:
        return len(self._frame.index)

    @property
    def is_empty(self) -> bool:
        return self.n_rows == 0

    def values(self, key: str) -> pd.Series:
        """String values of one column, in row order."""
        self.column(key)
        return self._frame[key]

    def rows(self, mask: Optional[np.ndarray] = None) -> List[Row]:
        """Rows as dicts in load order, optionally restricted to a boolean mask."""
        frame = self._frame if mask is None else self._frame[mask]
        return frame.to_dict("records")

    # -------------------------------------------------------------------------
    # Live-row masks (cached)
    # -------------------------------------------------------------------------
    def _mask_cache_key(self, constraints: Iterable[Tuple[str, Sequence[str]]]) -> ConstraintKey:
        return tuple(
            sorted(
                (key, tuple(sorted(set(values))))
                for key, values in constraints
                if values
            )
        )

    def live_mask(self, constraints: Iterable[Tuple[str, Sequence[str]]]) -> np.ndarray:
        """
        Boolean mask of rows that are live under the given constraints.

        A row is live iff, for every column with a non-empty selection, its
        value is a member of that selection. Empty selections impose nothing.
        The returned array is read-only.
        """
        key = self._mask_cache_key(constraints)
        cached = self._mask_cache.get(key)
        if cached is not None:
            return cached

        mask = np.ones(self.n_rows, dtype=bool)
        for column_key, selected in key:
            mask &= self.values(column_key).isin(selected).to_numpy()
        mask.flags.writeable = False

        self._mask_cache[key] = mask

        # Prevent unbounded growth
        if len(self._mask_cache) > self.MAX_MASK_CACHE:
            self._mask_cache.clear()

        return mask

    def __repr__(self) -> str:
        return f"Dataset(name={self.name!r}, rows={self.n_rows}, columns={[c.key for c in self._columns]})"
