"""Functional core - pure text transforms with no I/O."""

from .grammar import Classification, LineKind, classify, parse_completion_date, split_lines
from .age import cutoff_for, is_expired
from .cleaner import CleanResult, clean
from .reorder import partition, reorder
from .insertion import InsertPosition, format_todo_line, insert_todo
from .frontmatter import MetadataHeader, metadata_header

__all__ = [
    # Grammar
    "Classification",
    "LineKind",
    "classify",
    "parse_completion_date",
    "split_lines",
    # Age policy
    "cutoff_for",
    "is_expired",
    # Passes
    "CleanResult",
    "clean",
    "partition",
    "reorder",
    # Insertion
    "InsertPosition",
    "format_todo_line",
    "insert_todo",
    # Front matter
    "MetadataHeader",
    "metadata_header",
]
