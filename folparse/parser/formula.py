"""
Formula utilities.

Provides convenience functions for parsing and inspecting formulas:
subformula extraction and syntactic collection of relation symbols and
variable names. Nothing here checks scoping or arity consistency.
"""

from __future__ import annotations

from typing import FrozenSet

from folparse.parser.ast_nodes import Exists, Forall, Formula, Relation
from folparse.parser.grammar import FormulaParser


_parser = FormulaParser()


def parse_formula(text: str) -> Formula:
    """
    Parse a formula string into an AST.

    Args:
        text: The formula string.

    Returns:
        The root Formula node of the AST.

    Raises:
        ParseError: If the formula is syntactically invalid.
        ConversionError: If the parse tree cannot be converted.
    """
    return _parser.parse(text)


def subformulas(formula: Formula) -> FrozenSet[Formula]:
    """
    Return all subformulas of the given formula, including itself.

    Args:
        formula: The formula to extract subformulas from.

    Returns:
        A frozenset of all subformulas.
    """
    return formula.subformulas()


def relation_names(formula: Formula) -> FrozenSet[str]:
    """Return all relation symbols appearing in the formula."""
    return frozenset(
        sub.name for sub in formula.subformulas() if isinstance(sub, Relation)
    )


def term_variables(formula: Formula) -> FrozenSet[str]:
    """
    Return the names of all variables occurring in relation arguments.

    Bound and free occurrences are not distinguished.
    """
    names: FrozenSet[str] = frozenset()
    for sub in formula.subformulas():
        if isinstance(sub, Relation):
            for arg in sub.args:
                names |= arg.variables()
    return names


def quantified_variables(formula: Formula) -> FrozenSet[str]:
    """Return the names bound by any ``Exists`` or ``Forall`` in the formula."""
    return frozenset(
        sub.variable
        for sub in formula.subformulas()
        if isinstance(sub, (Exists, Forall))
    )
