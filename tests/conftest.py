"""
Shared pytest fixtures for the folparse test suite.

Provides a compiled grammar, a fresh parser, and the reference formulas
used across unit and integration tests.
"""

import pytest

from folparse.parser.grammar import FormulaParser, Grammar, compile_grammar


DRINKER_PARADOX = (
    'Exists "x" (Implies (Rel "D" [Var "x"]) (Forall "y" (Rel "D" [Var "y"])))'
)

GOOD_FORMULAS = [
    "T",
    "And (T) (T)",
    'Exists "x" (T)',
    'Rel "D" [Var "x"]',
    'Forall "y" (F)',
    'Forall "y" (Rel "D" [Var "y"])',
    DRINKER_PARADOX,
]


@pytest.fixture
def grammar() -> Grammar:
    """The compiled formula grammar."""
    return compile_grammar()


@pytest.fixture
def parser(grammar: Grammar) -> FormulaParser:
    """A fresh parser over the shared grammar."""
    return FormulaParser(grammar)


@pytest.fixture
def drinker_paradox() -> str:
    """The drinker paradox schema in surface syntax."""
    return DRINKER_PARADOX


@pytest.fixture
def good_formulas() -> list[str]:
    """Formulas the grammar must accept."""
    return list(GOOD_FORMULAS)
