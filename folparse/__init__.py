"""
folparse: grammar-driven parsing of first-order logic formulas.

Formulas are written in a constructor-style surface syntax, e.g.
``Exists "x" (Implies (Rel "D" [Var "x"]) (Forall "y" (Rel "D" [Var "y"])))``,
parsed by an LALR(1) grammar into a generic parse tree and then converted
into a typed formula AST.
"""

__version__ = "0.1.0"

from folparse.parser import (  # noqa: E402
    ConversionError,
    Formula,
    FormulaParser,
    GrammarError,
    ParseError,
    ParseTree,
    compile_grammar,
    parse_formula,
)

__all__ = [
    "ConversionError",
    "Formula",
    "FormulaParser",
    "GrammarError",
    "ParseError",
    "ParseTree",
    "compile_grammar",
    "parse_formula",
]
