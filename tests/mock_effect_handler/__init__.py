from .table import MockTableEffect, show_row

__all__ = [
    "MockTableEffect",
    "show_row",
]
