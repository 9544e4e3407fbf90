"""
Service layer for modcommit.

Contains the orchestration that ties the infrastructure together:
- ModuleCommitService: install modules, build tree, create commit
"""

from .commit_service import ModuleCommitService, commit_message, temporary_index

__all__ = [
    'ModuleCommitService',
    'commit_message',
    'temporary_index',
]
