"""
Lexical analyzer for first-order formulas.

Tokenizes formula strings written in constructor syntax
(``Forall "y" (Rel "D" [Var "y"])``) into keywords, quoted names and
delimiters that can be consumed by the grammar.
"""

from __future__ import annotations

import sly

from folparse.parser.exceptions import LexerError


# Keywords of the surface syntax. Matching is exact and case-sensitive.
KEYWORDS = {
    "T": "TRUE",
    "F": "FALSE",
    "Rel": "REL",
    "Var": "VAR",
    "Fun": "FUN",
    "Not": "NOT",
    "And": "AND",
    "Or": "OR",
    "Implies": "IMPLIES",
    "Exists": "EXISTS",
    "Forall": "FORALL",
}


class FormulaLexer(sly.Lexer):
    """
    Lexical analyzer for first-order formulas.

    Converts a formula string into a stream of tokens.

    Token Types:
        TRUE, FALSE                  - Truth constants ``T`` and ``F``
        REL, VAR, FUN                - Relation and term constructors
        NOT, AND, OR, IMPLIES        - Connectives
        EXISTS, FORALL               - Quantifiers
        STRING                       - Quoted name, quotes included
        LPAREN, RPAREN               - Sub-formula delimiters
        LBRACKET, RBRACKET, COMMA    - Argument list delimiters

    ``WORD`` never reaches the parser: every bare word is either mapped to
    a keyword type or rejected.
    """

    tokens = {
        TRUE, FALSE,
        REL, VAR, FUN,
        NOT, AND, OR, IMPLIES,
        EXISTS, FORALL,
        STRING,
        LPAREN, RPAREN,
        LBRACKET, RBRACKET, COMMA,
        WORD,
    }

    # Ignored characters
    ignore = " \t\r"

    @_(r"\n+")
    def ignore_newline(self, t):
        self.lineno += len(t.value)

    # Quoted names keep their quotes; the builder validates the contents
    STRING = r'"[^"\n]*"'

    LPAREN = r"\("
    RPAREN = r"\)"
    LBRACKET = r"\["
    RBRACKET = r"\]"
    COMMA = r","

    @_(r"[A-Za-z][A-Za-z0-9]*")
    def WORD(self, t):
        if t.value not in KEYWORDS:
            raise LexerError(
                f"Unknown word '{t.value}' at index {t.index}", index=t.index
            )
        t.type = KEYWORDS[t.value]
        return t

    def error(self, t):
        """Handle invalid characters."""
        raise LexerError(
            f"Invalid character '{t.value[0]}' at index {self.index}",
            index=self.index,
        )
