"""
Grammar engine for first-order formulas.

The grammar is declared as SLY productions and compiled into LALR(1)
tables once per process. Each parse builds a fresh parser instance that
derives a concrete ``ParseTree``; conversion to typed AST nodes is left
to ``folparse.parser.builder``.

Grammar::

    formula  ::= "T" | "F"
               | "Rel" name "[" terms "]"
               | "Not" group
               | "And" group group | "Or" group group | "Implies" group group
               | "Exists" name group | "Forall" name group
    group    ::= "(" formula ")"
    terms    ::= <empty> | term_seq
    term_seq ::= term | term_seq "," term
    term     ::= "Var" name | "Fun" name "[" terms "]"
    name     ::= STRING

Every production begins with a distinct keyword or delimiter, so the
tables are conflict-free and each input has at most one derivation.
"""

from __future__ import annotations

import functools
from dataclasses import dataclass
from typing import Callable, Optional, Tuple, TypeVar

import sly
from sly.yacc import YaccError

from folparse.parser.ast_nodes import Formula
from folparse.parser.builder import build_formula
from folparse.parser.exceptions import (
    ConversionError,
    GrammarError,
    LexerError,
    ParseError,
    ParserConstructionError,
)
from folparse.parser.lexer import FormulaLexer
from folparse.parser.parse_tree import ParseTree
from folparse.utils.logger import LogLevel, ParserLogger

R = TypeVar("R")


def _convert(tree: ParseTree) -> Formula:
    """Build the AST, reporting nesting too deep for Python as a conversion error."""
    try:
        return build_formula(tree)
    except RecursionError as exc:
        raise ConversionError(
            "Nesting too deep to convert", tree.label, ", ".join(tree.child_labels())
        ) from exc


def _define_parser_class() -> type:
    """Declare the SLY parser; table construction happens at class creation."""

    class _FormulaGrammar(sly.Parser):
        """SLY-based LALR(1) parser emitting concrete parse trees."""

        tokens = FormulaLexer.tokens - {"WORD"}
        start = "formula"

        # Input text, set per instance for error messages
        source = ""

        # --- Truth constants ---

        @_("TRUE")
        def formula(self, p):
            return ParseTree.node("truth", ParseTree.leaf("TRUE", p.TRUE))

        @_("FALSE")
        def formula(self, p):
            return ParseTree.node("truth", ParseTree.leaf("FALSE", p.FALSE))

        # --- Relations ---

        @_("REL quoted_name LBRACKET terms RBRACKET")
        def formula(self, p):
            return ParseTree.node(
                "relation",
                ParseTree.leaf("REL", p.REL),
                p.quoted_name,
                ParseTree.leaf("LBRACKET", p.LBRACKET),
                p.terms,
                ParseTree.leaf("RBRACKET", p.RBRACKET),
            )

        # --- Connectives ---

        @_("NOT group")
        def formula(self, p):
            return ParseTree.node("not", ParseTree.leaf("NOT", p.NOT), p.group)

        @_("AND group group")
        def formula(self, p):
            return ParseTree.node(
                "and", ParseTree.leaf("AND", p.AND), p.group0, p.group1
            )

        @_("OR group group")
        def formula(self, p):
            return ParseTree.node(
                "or", ParseTree.leaf("OR", p.OR), p.group0, p.group1
            )

        @_("IMPLIES group group")
        def formula(self, p):
            return ParseTree.node(
                "implies", ParseTree.leaf("IMPLIES", p.IMPLIES), p.group0, p.group1
            )

        # --- Quantifiers ---

        @_("EXISTS quoted_name group")
        def formula(self, p):
            return ParseTree.node(
                "exists", ParseTree.leaf("EXISTS", p.EXISTS), p.quoted_name, p.group
            )

        @_("FORALL quoted_name group")
        def formula(self, p):
            return ParseTree.node(
                "forall", ParseTree.leaf("FORALL", p.FORALL), p.quoted_name, p.group
            )

        # --- Parenthesized sub-formulas ---

        @_("LPAREN formula RPAREN")
        def group(self, p):
            return ParseTree.node(
                "group",
                ParseTree.leaf("LPAREN", p.LPAREN),
                p.formula,
                ParseTree.leaf("RPAREN", p.RPAREN),
            )

        # --- Terms ---

        @_("")
        def empty(self, p):
            pass

        @_("empty")
        def terms(self, p):
            return ParseTree.node("terms")

        @_("term_seq")
        def terms(self, p):
            return ParseTree.node("terms", *p.term_seq)

        @_("term")
        def term_seq(self, p):
            return [p.term]

        @_("term_seq COMMA term")
        def term_seq(self, p):
            return p.term_seq + [ParseTree.leaf("COMMA", p.COMMA), p.term]

        @_("VAR quoted_name")
        def term(self, p):
            return ParseTree.node("var", ParseTree.leaf("VAR", p.VAR), p.quoted_name)

        @_("FUN quoted_name LBRACKET terms RBRACKET")
        def term(self, p):
            return ParseTree.node(
                "fun",
                ParseTree.leaf("FUN", p.FUN),
                p.quoted_name,
                ParseTree.leaf("LBRACKET", p.LBRACKET),
                p.terms,
                ParseTree.leaf("RBRACKET", p.RBRACKET),
            )

        @_("STRING")
        def quoted_name(self, p):
            return ParseTree.node("name", ParseTree.leaf("STRING", p.STRING))

        def error(self, token):
            if token:
                raise ParseError(
                    f"Syntax error at '{token.value}' "
                    f"(type: {token.type}, index: {token.index}) "
                    f"in formula: {self.source}",
                    text=self.source,
                    index=token.index,
                )
            raise ParseError(
                f"Syntax error: unexpected end of formula: {self.source}",
                text=self.source,
            )

    return _FormulaGrammar


@dataclass(frozen=True)
class Grammar:
    """
    Compiled formula grammar.

    Read-only after construction and safe to share between callers;
    every parse builds its own lexer and parser instances.

    Attributes:
        parser_class: The generated SLY parser class.
        lexer_class: The lexer class feeding it.
    """

    parser_class: type
    lexer_class: type = FormulaLexer

    def build_parser(self, source: str) -> Tuple[sly.Lexer, sly.Parser]:
        """
        Construct a fresh lexer/parser pair for one input.

        Raises:
            ParserConstructionError: If either instance cannot be built.
        """
        try:
            lexer = self.lexer_class()
            parser = self.parser_class()
            parser.source = source
        except Exception as exc:
            raise ParserConstructionError(f"Couldn't build parser: {exc}") from exc
        return lexer, parser


@functools.lru_cache(maxsize=None)
def compile_grammar() -> Grammar:
    """
    Compile the formula grammar.

    The result is cached, so the LALR tables are generated once per process.

    Raises:
        GrammarError: If SLY rejects the grammar declaration.
    """
    try:
        parser_class = _define_parser_class()
    except YaccError as exc:
        raise GrammarError(f"Couldn't compile grammar: {exc}") from exc
    return Grammar(parser_class)


class FormulaParser:
    """
    Parser for first-order formulas.

    Wraps the compiled grammar with a clean public interface: raw text
    goes in, a ``ParseTree`` (through ``with_parse_tree``) or a typed
    ``Formula`` (through ``parse``) comes out.
    """

    def __init__(
        self,
        grammar: Optional[Grammar] = None,
        logger: Optional[ParserLogger] = None,
        max_length: Optional[int] = None,
    ) -> None:
        """
        Args:
            grammar: Compiled grammar; defaults to the shared compiled one.
            logger: Logger for parse outcomes; defaults to a silent logger.
            max_length: Reject inputs longer than this many characters.
        """
        self._logger = logger if logger is not None else ParserLogger(LogLevel.SILENT)
        if grammar is None:
            grammar = compile_grammar()
            self._logger.info("Grammar ready", parser=grammar.parser_class.__name__)
        self._grammar = grammar
        self._max_length = max_length

    @property
    def grammar(self) -> Grammar:
        return self._grammar

    def with_parse_tree(self, text: str, callback: Callable[[ParseTree], R]) -> R:
        """
        Parse ``text`` and run ``callback`` on the resulting parse tree.

        Args:
            text: The formula string to parse.
            callback: Function applied to the parse tree.

        Returns:
            Whatever ``callback`` returns.

        Raises:
            ParseError: If the text has no derivation under the grammar.
        """
        tree = self._derive(text)
        return callback(tree)

    def parse(self, text: str) -> Formula:
        """
        Parse a formula string into an AST.

        Args:
            text: The formula string to parse.

        Returns:
            The root Formula node of the AST.

        Raises:
            ParseError: If the formula is syntactically invalid.
            ConversionError: If the parse tree cannot be converted.
        """
        try:
            formula = self.with_parse_tree(text, _convert)
        except ConversionError as exc:
            self._logger.conversion_failed(text, str(exc))
            raise
        self._logger.input_accepted(text)
        return formula

    def _derive(self, text: str) -> ParseTree:
        """Build a parser for ``text`` and return its first derivation."""
        if not text.strip():
            raise self._reject(text, "Syntax error: empty formula")
        if self._max_length is not None and len(text) > self._max_length:
            raise self._reject(
                text,
                f"Formula length {len(text)} exceeds limit of {self._max_length}",
            )

        lexer, parser = self._grammar.build_parser(text)
        try:
            tokens = list(lexer.tokenize(text))
        except LexerError as exc:
            raise self._reject(text, f"{exc} in formula: {text}", exc.index) from exc
        self._logger.debug("Tokenized formula", tokens=len(tokens))

        try:
            tree = parser.parse(iter(tokens))
        except ParseError as exc:
            self._logger.input_rejected(text, str(exc))
            raise
        if tree is None:
            raise self._reject(text, f"Grammar could not parse input: {text}")

        if self._logger.level.value >= LogLevel.DEBUG.value:
            self._logger.statistics({"tree_depth": tree.depth()})
        return tree

    def _reject(
        self, text: str, message: str, index: Optional[int] = None
    ) -> ParseError:
        self._logger.input_rejected(text, message)
        return ParseError(message, text=text, index=index)
