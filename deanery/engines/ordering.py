"""
Alphabetical Ordering Engine.

This module turns an unordered collection of students into the
deterministic alphabetical sequence used on every grading sheet.
"""

from typing import Iterable, List, Optional

from pyuca import Collator

from ..models import Student

_collator = None


def collation_key(name: str) -> tuple:
    """
    Locale-aware sort key for a display name.

    Uses the Unicode Collation Algorithm with the default element table, so
    Cyrillic and Latin names both sort in natural alphabetical order and
    case still matters at the tertiary level ("ivanov" < "Ivanov").

    WHY LAZY: building the Collator parses the full allkeys table, which
    takes noticeable time. It is built on first use and shared afterwards.
    """
    global _collator
    if _collator is None:
        _collator = Collator()
    return _collator.sort_key(name)


class _Node:
    __slots__ = ("student", "key", "left", "right")

    def __init__(self, student: Student, key: tuple):
        self.student = student
        self.key = key
        self.left: Optional["_Node"] = None
        self.right: Optional["_Node"] = None


class SortingTree:
    """
    Binary search tree keyed by student name.

    INSERTION RULE:
    ---------------
    Descend from the root. If the new name collates strictly before the
    current node's name, go left; otherwise (equal or greater) go right.
    The student becomes a leaf at the first empty slot.

    STABILITY:
    ----------
    Because equal names always go right, a student inserted later lands
    after every earlier student with the same name. The in-order traversal
    therefore keeps insertion order among equal names.

    Both insert and traverse are iterative: an already-sorted roster
    degenerates the tree into a linked list, and recursion would hit
    Python's recursion limit on a large one.
    """

    def __init__(self):
        self._root: Optional[_Node] = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def insert(self, student: Student):
        node = _Node(student, collation_key(student.name))
        self._size += 1

        if self._root is None:
            self._root = node
            return

        current = self._root
        while True:
            if node.key < current.key:
                if current.left is None:
                    current.left = node
                    return
                current = current.left
            else:
                if current.right is None:
                    current.right = node
                    return
                current = current.right

    def traverse(self) -> List[Student]:
        """In-order traversal: left subtree, node, right subtree."""
        result = []
        stack = []
        current = self._root
        while stack or current is not None:
            while current is not None:
                stack.append(current)
                current = current.left
            current = stack.pop()
            result.append(current.student)
            current = current.right
        return result


def sort_students(students: Iterable[Student]) -> List[Student]:
    """
    Return students in alphabetical order by name.

    The tree is built fresh for every call and discarded afterwards; the
    input collection is never modified. Empty input gives an empty list.
    """
    tree = SortingTree()
    for student in students:
        tree.insert(student)
    return tree.traverse()
