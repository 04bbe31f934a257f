"""Comma context classification."""

from commaspacing.analysis.context import CommaContexts, ListContext, classify, classify_commas

__all__ = ["CommaContexts", "ListContext", "classify", "classify_commas"]
