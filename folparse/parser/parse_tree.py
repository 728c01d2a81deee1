"""
Generic concrete parse tree produced by the formula grammar.

Non-terminal nodes are labelled with their production name (``relation``,
``and``, ``group``, ...) and hold their children in source order. Terminal
leaves are labelled with their token type and hold the matched text.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional, Tuple


@dataclass(frozen=True)
class ParseTree:
    """
    Immutable parse tree node.

    Attributes:
        label: Production name for non-terminals, token type for leaves.
        children: Child nodes in source order (empty for leaves).
        text: Matched input text for leaves, ``None`` for non-terminals.
    """

    label: str
    children: Tuple[ParseTree, ...] = ()
    text: Optional[str] = None

    @classmethod
    def leaf(cls, label: str, text: str) -> ParseTree:
        """Create a terminal node for a token."""
        return cls(label, (), text)

    @classmethod
    def node(cls, label: str, *children: ParseTree) -> ParseTree:
        """Create a non-terminal node from its children."""
        return cls(label, tuple(children))

    @property
    def is_leaf(self) -> bool:
        """Token nodes always carry text; non-terminals never do."""
        return self.text is not None

    def child_labels(self) -> Tuple[str, ...]:
        return tuple(child.label for child in self.children)

    def walk(self) -> Iterator[ParseTree]:
        """Yield this node and all descendants in pre-order."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def depth(self) -> int:
        """Return the number of nodes on the longest root-to-leaf path."""
        deepest = 0
        stack = [(self, 1)]
        while stack:
            node, level = stack.pop()
            deepest = max(deepest, level)
            stack.extend((child, level + 1) for child in node.children)
        return deepest
