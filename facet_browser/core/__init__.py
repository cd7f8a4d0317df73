"""
Core engine layer: dataset abstraction, column type inference, facet
calculation, filter state transitions and the visible-row projection
"""

from .dataset import ColumnDescriptor, Dataset
from .exceptions import ConfigurationError, DatasetSchemaError, FacetBrowserError, SourceUnavailable
from .facets import FacetOption, compute_all_options, compute_options
from .filter_state import FilterState, FilterStateManager
from .type_inference import ColumnKind
from .view import visible_rows

__all__ = [
    "ColumnDescriptor",
    "ColumnKind",
    "ConfigurationError",
    "Dataset",
    "DatasetSchemaError",
    "FacetBrowserError",
    "FacetOption",
    "FilterState",
    "FilterStateManager",
    "SourceUnavailable",
    "compute_all_options",
    "compute_options",
    "visible_rows",
]
