"""
First-order formula parser for folparse.

Provides lexical analysis, grammar-driven parsing into concrete parse
trees, and conversion of those trees into typed formula ASTs.
"""

from folparse.parser.ast_nodes import (
    And,
    Conjunction,
    Disjunction,
    Exists,
    FalseConstant,
    Forall,
    Formula,
    Fun,
    Implication,
    Implies,
    Negation,
    Not,
    Or,
    Relation,
    Term,
    TrueConstant,
    Var,
)
from folparse.parser.builder import build_formula, build_term
from folparse.parser.exceptions import (
    ConversionError,
    FormulaError,
    GrammarError,
    LexerError,
    ParseError,
    ParserConstructionError,
)
from folparse.parser.formula import parse_formula
from folparse.parser.grammar import FormulaParser, Grammar, compile_grammar
from folparse.parser.lexer import FormulaLexer
from folparse.parser.parse_tree import ParseTree

__all__ = [
    "And",
    "Conjunction",
    "ConversionError",
    "Disjunction",
    "Exists",
    "FalseConstant",
    "Forall",
    "Formula",
    "FormulaError",
    "FormulaLexer",
    "FormulaParser",
    "Fun",
    "Grammar",
    "GrammarError",
    "Implication",
    "Implies",
    "LexerError",
    "Negation",
    "Not",
    "Or",
    "ParseError",
    "ParseTree",
    "ParserConstructionError",
    "Relation",
    "Term",
    "TrueConstant",
    "Var",
    "build_formula",
    "build_term",
    "compile_grammar",
    "parse_formula",
]
