"""
Result domain object for modcommit.
"""

from dataclasses import dataclass, field
from typing import Dict, Any, List


@dataclass
class CommitResult:
    """
    Outcome of building a module commit.

    Holds the ids git produced plus the inputs that produced them.
    """
    parent_ref: str
    parent: str
    tree: str
    commit: str
    installer: str
    message: str
    modules: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            'commit': self.commit,
            'tree': self.tree,
            'parent': self.parent,
            'parent_ref': self.parent_ref,
            'installer': self.installer,
            'modules': list(self.modules),
            'message': self.message,
        }
