"""
Filter Index Module - Positions of buffered entries matching the filter text

Matching is case-insensitive substring containment over the entry content.
An empty filter matches every entry.
"""
import logging
from typing import Iterator, List, Optional

from .entry_store import EntryStore
from .log_parser import LogEntry

logger = logging.getLogger(__name__)


class FilterIndex:
    """Ordered list of EntryStore positions whose content matches ``filter_text``"""

    def __init__(self, filter_text: str = ""):
        self.filter_text = filter_text
        self._filter_lower = filter_text.lower()
        self.positions: List[int] = []

    def matches(self, entry: LogEntry) -> bool:
        if not self._filter_lower:
            return True
        return self._filter_lower in entry.content.lower()

    def recompute(self, store: EntryStore, filter_text: Optional[str] = None) -> List[int]:
        """
        Rebuild the index against the store in a single pass

        Args:
            store: Current entry store
            filter_text: New predicate text (None keeps the current one)

        Returns:
            The rebuilt list of matching positions
        """
        if filter_text is not None:
            self.filter_text = filter_text
            self._filter_lower = filter_text.lower()

        self.positions = [i for i, entry in enumerate(store) if self.matches(entry)]

        logger.debug(
            "Filter %r matched %d of %d entries",
            self.filter_text, len(self.positions), len(store)
        )
        return self.positions

    def set_filter_text(self, text: str, store: EntryStore) -> List[int]:
        """Update the predicate and recompute"""
        return self.recompute(store, text)

    def __len__(self) -> int:
        return len(self.positions)

    def __iter__(self) -> Iterator[int]:
        return iter(self.positions)
