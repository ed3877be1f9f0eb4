"""
Result data models.

The finder returns a ``SearchResult``: matched paths in traversal order.
The host sees results as 1-indexed tables, so the result can render itself
in that shape as well.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterator, List


@dataclass
class SearchResult:
    """
    Ordered matches of a find call.

    Insertion order is the order the walk reached each file. Duplicates are
    kept if the filesystem presents the same file twice.
    """

    paths: List[str] = field(default_factory=list)

    def append(self, path: str) -> None:
        self.paths.append(path)

    def __iter__(self) -> Iterator[str]:
        return iter(self.paths)

    def __len__(self) -> int:
        return len(self.paths)

    def __getitem__(self, index: int) -> str:
        return self.paths[index]

    def __bool__(self) -> bool:
        return bool(self.paths)

    def to_table(self) -> Dict[int, str]:
        """Return the matches keyed from 1, as the host indexes sequences."""
        return {position: path for position, path in enumerate(self.paths, start=1)}
