"""
Exceptions raised while compiling the grammar, parsing formula text,
and converting parse trees into formula ASTs.

``GrammarError`` and ``ParserConstructionError`` signal configuration
problems. ``ParseError`` and ``ConversionError`` are per-input failures
and carry enough context (input text, node label) to diagnose without
re-parsing.
"""

from __future__ import annotations

from typing import Optional


class FormulaError(Exception):
    """Base class for all folparse errors."""

    pass


class GrammarError(FormulaError):
    """Raised when the formula grammar itself cannot be compiled."""

    pass


class ParserConstructionError(FormulaError):
    """Raised when a parser instance cannot be built from a compiled grammar."""

    pass


class LexerError(FormulaError):
    """
    Raised for invalid characters or unknown words in formula text.

    Attributes:
        index: Offset of the offending character in the input.
    """

    def __init__(self, message: str, index: Optional[int] = None) -> None:
        super().__init__(message)
        self.index = index


class ParseError(FormulaError):
    """
    Raised when the input has no derivation under the grammar.

    Attributes:
        text: The input that was rejected.
        index: Offset of the offending token, if known.
    """

    def __init__(
        self,
        message: str,
        text: Optional[str] = None,
        index: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.text = text
        self.index = index


class ConversionError(FormulaError):
    """
    Raised when a parse tree node cannot be turned into a formula or term.

    Attributes:
        label: Label of the offending parse tree node.
        context: Short rendering of the node's children.
    """

    def __init__(self, message: str, label: str, context: str = "") -> None:
        detail = f"{message} (node '{label}'"
        if context:
            detail += f", children: {context}"
        super().__init__(detail + ")")
        self.label = label
        self.context = context
