"""Utility helpers for the checker."""

from .fileio import read_yaml_file, read_source_file
from .code import code_part, iter_source_files

__all__ = [
    "read_yaml_file",
    "read_source_file",
    "code_part",
    "iter_source_files",
]
