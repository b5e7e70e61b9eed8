"""
Adapter layer for infra implementation.

This layer provides EffectHandler classes that satisfy the handler Effect protocols.
"""

from .table_handler import TableEffectHandler

__all__ = ["TableEffectHandler"]
