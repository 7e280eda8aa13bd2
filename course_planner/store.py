import logging
from typing import Iterator, List, Optional

from course_planner.course import CourseRecord

logger = logging.getLogger(__name__)


class OrderedCourseStore:
    """Binary search tree of course records keyed on identifier.

    Nodes live in an arena: node ``i`` holds ``records[i]`` and the indices of
    its children in ``left[i]`` / ``right[i]`` (``None`` for an empty slot).
    Equal identifiers descend right, so the tree is an ordered multiset and
    duplicates are listed in insertion order. There is no rebalancing and no
    internal locking; a threaded caller has to guard the store itself.
    """

    def __init__(self):
        self.records: List[CourseRecord] = []
        self.left: List[Optional[int]] = []
        self.right: List[Optional[int]] = []
        self.root: Optional[int] = None

    def __len__(self):
        return len(self.records)

    def __iter__(self):
        return self.in_order()

    def __contains__(self, identifier):
        return self.find(identifier) is not None

    def is_empty(self):
        return self.root is None

    def _new_node(self, record):
        self.records.append(record)
        self.left.append(None)
        self.right.append(None)
        return len(self.records) - 1

    def insert(self, record: CourseRecord) -> None:
        if self.root is None:
            self.root = self._new_node(record)
            logger.debug(f"Inserted {record.identifier} as root")
            return

        current = self.root
        while True:
            if record.identifier < self.records[current].identifier:
                child = self.left[current]
                if child is None:
                    self.left[current] = self._new_node(record)
                    break
            else:
                child = self.right[current]
                if child is None:
                    self.right[current] = self._new_node(record)
                    break
            current = child

        logger.debug(f"Inserted {record.identifier} below {self.records[current].identifier}")

    def find(self, identifier: str) -> Optional[CourseRecord]:
        """Return the first record matching ``identifier`` on the search path, or None."""
        current = self.root
        while current is not None:
            record = self.records[current]
            if record.identifier == identifier:
                return record
            if identifier < record.identifier:
                current = self.left[current]
            else:
                current = self.right[current]
        return None

    def search(self, identifier: str) -> CourseRecord:
        """Look up a course by identifier.

        Returns the not-found sentinel (a record with an empty identifier)
        instead of raising when nothing matches. Check ``record.found`` or use
        :meth:`find` to get ``None`` instead.
        """
        record = self.find(identifier)
        if record is None:
            return CourseRecord.not_found()
        return record

    def in_order(self) -> Iterator[CourseRecord]:
        """Yield every record in non-decreasing identifier order."""
        stack = []
        current = self.root
        while stack or current is not None:
            # Walk down the left spine, then visit and switch to the right subtree
            while current is not None:
                stack.append(current)
                current = self.left[current]
            current = stack.pop()
            yield self.records[current]
            current = self.right[current]

    def depth(self) -> int:
        """Number of nodes on the longest root-to-leaf path (0 for an empty tree)."""
        if self.root is None:
            return 0
        deepest = 0
        stack = [(self.root, 1)]
        while stack:
            node, level = stack.pop()
            deepest = max(deepest, level)
            for child in (self.left[node], self.right[node]):
                if child is not None:
                    stack.append((child, level + 1))
        return deepest
