class FacetBrowserError(Exception):
    """Base exception for all facet_browser errors"""
    pass


class ConfigurationError(FacetBrowserError):
    """
    The caller referenced a column that is not a filterable column of the
    active dataset (or an unknown dataset key). This is a logic error in the
    caller and is never swallowed by the engine.
    """
    pass


class SourceUnavailable(FacetBrowserError):
    """The data source could not produce a dataset (missing file, parse error, ...)"""
    pass


class DatasetSchemaError(FacetBrowserError):
    """Rows don't match the column header they were loaded with"""
    pass
