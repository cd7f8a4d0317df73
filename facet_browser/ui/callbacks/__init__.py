from .callbacks_filters import register_filter_callbacks
from .callbacks_table import register_table_callbacks

__all__ = ["register_filter_callbacks", "register_table_callbacks"]
