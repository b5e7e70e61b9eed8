from .create_table import EffectCreateTable, handle_create_table
from .delete_table import EffectDeleteTable, handle_delete_table
from .read_table import EffectReadTable, handle_read_table
from .table_exists import handle_table_exists
from .update_table import EffectUpdateTable, handle_update_table

__all__ = [
    "EffectCreateTable",
    "EffectDeleteTable",
    "EffectReadTable",
    "EffectUpdateTable",
    "handle_create_table",
    "handle_delete_table",
    "handle_read_table",
    "handle_table_exists",
    "handle_update_table",
]
