"""
Tests for formula utilities: module-level parsing and syntactic
collection of subformulas, relation symbols and variables.
"""

import pytest

from folparse.parser.ast_nodes import (
    Conjunction,
    Exists,
    Forall,
    Implication,
    Relation,
    TrueConstant,
    Var,
)
from folparse.parser.exceptions import ParseError
from folparse.parser.formula import (
    parse_formula,
    quantified_variables,
    relation_names,
    subformulas,
    term_variables,
)


class TestParseFormula:
    """Test the module-level parse function."""

    def test_parses(self) -> None:
        assert parse_formula("And (T) (T)") == Conjunction(TrueConstant(), TrueConstant())

    def test_rejects(self) -> None:
        with pytest.raises(ParseError):
            parse_formula("And (T) (T")


class TestSubformulas:
    """Test subformula extraction."""

    def test_drinker_paradox(self, drinker_paradox: str) -> None:
        f = parse_formula(drinker_paradox)
        subs = subformulas(f)
        assert f in subs
        assert Relation("D", [Var("x")]) in subs
        assert Forall("y", Relation("D", [Var("y")])) in subs
        assert len(subs) == 5

    def test_shared_subterms_counted_once(self) -> None:
        f = parse_formula("And (T) (T)")
        assert subformulas(f) == frozenset({f, TrueConstant()})


class TestCollections:
    """Test relation and variable collection."""

    def test_relation_names(self, drinker_paradox: str) -> None:
        assert relation_names(parse_formula(drinker_paradox)) == frozenset({"D"})

    def test_relation_names_empty(self) -> None:
        assert relation_names(parse_formula('Exists "x" (T)')) == frozenset()

    def test_term_variables(self) -> None:
        f = parse_formula('And (Rel "R" [Var "x", Fun "f" [Var "z"]]) (Rel "P" [])')
        assert term_variables(f) == frozenset({"x", "z"})

    def test_term_variables_ignore_binders(self) -> None:
        assert term_variables(parse_formula('Exists "x" (T)')) == frozenset()

    def test_quantified_variables(self, drinker_paradox: str) -> None:
        assert quantified_variables(parse_formula(drinker_paradox)) == frozenset({"x", "y"})

    def test_quantified_variables_built_directly(self) -> None:
        f = Implication(TrueConstant(), Exists("v", TrueConstant()))
        assert quantified_variables(f) == frozenset({"v"})
