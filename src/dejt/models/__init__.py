"""Modelos de saída do dejt."""

from .lawsuit import LawsuitRecord

__all__ = ["LawsuitRecord"]
