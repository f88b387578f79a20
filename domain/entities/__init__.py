"""Domain Entities"""
from .diff_result import DiffResult, DiffLine, DiffStats, DiffType

__all__ = ["DiffResult", "DiffLine", "DiffStats", "DiffType"]
