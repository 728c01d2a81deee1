"""
End-to-end tests: formula text through the public package API.

Covers the reference formulas, compositional construction of larger
formulas from smaller ones, and sharing one compiled grammar between
threads.
"""

from concurrent.futures import ThreadPoolExecutor

import pytest

import folparse
from folparse.parser import (
    And,
    Exists,
    FalseConstant,
    Forall,
    Implies,
    Not,
    Or,
    Relation,
    TrueConstant,
    Var,
)

EXPECTED = {
    "T": TrueConstant(),
    "And (T) (T)": And(TrueConstant(), TrueConstant()),
    'Exists "x" (T)': Exists("x", TrueConstant()),
    'Rel "D" [Var "x"]': Relation("D", [Var("x")]),
    'Forall "y" (F)': Forall("y", FalseConstant()),
    'Forall "y" (Rel "D" [Var "y"])': Forall("y", Relation("D", [Var("y")])),
    'Exists "x" (Implies (Rel "D" [Var "x"]) (Forall "y" (Rel "D" [Var "y"])))': Exists(
        "x",
        Implies(Relation("D", [Var("x")]), Forall("y", Relation("D", [Var("y")]))),
    ),
}


class TestReferenceFormulas:
    """Every reference formula parses to its exact expected shape."""

    @pytest.mark.parametrize("text", sorted(EXPECTED))
    def test_expected_shape(self, text: str) -> None:
        assert folparse.parse_formula(text) == EXPECTED[text]

    def test_all_accepted_by_tree_access(self, good_formulas: list[str]) -> None:
        parser = folparse.FormulaParser()
        for text in good_formulas:
            assert parser.with_parse_tree(text, lambda tree: tree.label)


class TestCompositionality:
    """``And (a) (b)`` parses to the conjunction of ``a`` and ``b``."""

    @pytest.mark.parametrize("left", sorted(EXPECTED))
    def test_conjunction_of_parts(self, left: str) -> None:
        right = 'Forall "y" (Rel "D" [Var "y"])'
        combined = folparse.parse_formula(f"And ({left}) ({right})")
        assert combined == And(
            folparse.parse_formula(left), folparse.parse_formula(right)
        )

    def test_nested_connectives(self) -> None:
        a, b = 'Rel "P" []', 'Not (Rel "Q" [Var "z"])'
        text = f"Or (Implies ({a}) ({b})) (And ({b}) ({a}))"
        pa, pb = folparse.parse_formula(a), folparse.parse_formula(b)
        assert folparse.parse_formula(text) == Or(Implies(pa, pb), And(pb, pa))
        assert pb == Not(Relation("Q", [Var("z")]))


class TestSharedGrammar:
    """One compiled grammar serves independent parsers on many threads."""

    def test_concurrent_parses(self) -> None:
        texts = sorted(EXPECTED) * 10
        grammar = folparse.compile_grammar()

        def parse(text: str):
            return folparse.FormulaParser(grammar).parse(text)

        with ThreadPoolExecutor(max_workers=4) as pool:
            results = list(pool.map(parse, texts))
        assert results == [EXPECTED[text] for text in texts]

    def test_rejection_between_successes(self) -> None:
        parser = folparse.FormulaParser()
        assert parser.parse("T") == TrueConstant()
        with pytest.raises(folparse.ParseError):
            parser.parse('Rel "D" [Var x]')
        assert parser.parse("F") == FalseConstant()
