"""
Domain layer for modcommit.

Contains pure domain objects with no I/O or side effects:
- CommitResult: Ids and inputs of a built module commit
"""

from .result import CommitResult

__all__ = [
    'CommitResult',
]
