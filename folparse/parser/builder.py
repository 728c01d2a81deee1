"""
Conversion of concrete parse trees into typed formula ASTs.

Each parse tree node is dispatched on its label. A handler checks the
node's shape (child count and leaf labels), converts its children left to
right and assembles the AST node. Conversion only looks at the subtree it
is given, so converting a node is defined purely by converting its children.
"""

from __future__ import annotations

import re
from typing import Callable, Dict, List, Tuple

from folparse.parser.ast_nodes import (
    Conjunction,
    Disjunction,
    Exists,
    FalseConstant,
    Forall,
    Formula,
    Fun,
    Implication,
    Negation,
    Relation,
    Term,
    TrueConstant,
    Var,
)
from folparse.parser.exceptions import ConversionError
from folparse.parser.parse_tree import ParseTree

_NAME_RE = re.compile(r"[A-Za-z0-9]+")


def _fail(tree: ParseTree, message: str) -> ConversionError:
    return ConversionError(message, tree.label, ", ".join(tree.child_labels()))


def _expect(tree: ParseTree, *shape: str) -> Tuple[ParseTree, ...]:
    """
    Check that ``tree``'s children carry exactly the labels in ``shape``.

    An empty string in ``shape`` matches any label.
    """
    labels = tree.child_labels()
    if len(labels) != len(shape) or any(
        want and want != got for want, got in zip(shape, labels)
    ):
        raise _fail(tree, f"Expected children ({', '.join(s or '*' for s in shape)})")
    return tree.children


def unquote(tree: ParseTree) -> str:
    """
    Recover the literal text of a ``name`` node.

    Quotes only demarcate the name; no escape sequences are processed.

    Raises:
        ConversionError: If the node is not a well-formed quoted name.
    """
    if tree.label != "name":
        raise _fail(tree, "Expected a quoted name")
    (literal,) = _expect(tree, "STRING")
    if not literal.is_leaf:
        raise _fail(tree, "Expected a STRING token")
    raw = literal.text
    if len(raw) < 2 or raw[0] != '"' or raw[-1] != '"':
        raise _fail(tree, f"Malformed quoted name {raw!r}")
    content = raw[1:-1]
    if not _NAME_RE.fullmatch(content):
        raise _fail(tree, f"Quoted name must be alphanumeric, got {raw}")
    return content


def _group(tree: ParseTree) -> ParseTree:
    """Unwrap a parenthesized ``group`` node to the formula tree inside."""
    if tree.label != "group":
        raise _fail(tree, "Expected a parenthesized sub-formula")
    _, inner, _ = _expect(tree, "LPAREN", "", "RPAREN")
    return inner


def build_terms(tree: ParseTree) -> List[Term]:
    """Convert a ``terms`` node into its terms, in order."""
    if tree.label != "terms":
        raise _fail(tree, "Expected a term list")
    children = tree.children
    if children and len(children) % 2 == 0:
        raise _fail(tree, "Dangling separator in term list")
    if any(sep.label != "COMMA" for sep in children[1::2]):
        raise _fail(tree, "Term list items must be separated by commas")
    return [build_term(child) for child in children[0::2]]


def _var(tree: ParseTree) -> Term:
    _, name = _expect(tree, "VAR", "name")
    return Var(unquote(name))


def _fun(tree: ParseTree) -> Term:
    _, name, _, terms, _ = _expect(tree, "FUN", "name", "LBRACKET", "terms", "RBRACKET")
    return Fun(unquote(name), build_terms(terms))


_TERM_BUILDERS: Dict[str, Callable[[ParseTree], Term]] = {
    "var": _var,
    "fun": _fun,
}


def build_term(tree: ParseTree) -> Term:
    """
    Convert a term node (``var`` or ``fun``) into a Term.

    Raises:
        ConversionError: If the node is not a recognized term shape.
    """
    handler = _TERM_BUILDERS.get(tree.label)
    if handler is None:
        raise _fail(tree, "Unexpected term node")
    return handler(tree)


# --- Formula handlers ---
#
# Each handler checks a node's shape and returns the sub-formula trees it
# depends on, plus a function assembling the node from their conversions.

Parts = Tuple[List[ParseTree], Callable[[List[Formula]], Formula]]


def _truth(tree: ParseTree) -> Parts:
    (constant,) = _expect(tree, "")
    if not constant.is_leaf:
        raise _fail(tree, "Expected a truth constant token")
    if constant.label == "TRUE" and constant.text == "T":
        return [], lambda _: TrueConstant()
    if constant.label == "FALSE" and constant.text == "F":
        return [], lambda _: FalseConstant()
    raise _fail(tree, f"Unknown truth constant {constant.text!r}")


def _relation(tree: ParseTree) -> Parts:
    _, name, _, terms, _ = _expect(tree, "REL", "name", "LBRACKET", "terms", "RBRACKET")
    relation = Relation(unquote(name), build_terms(terms))
    return [], lambda _: relation


def _not(tree: ParseTree) -> Parts:
    _, operand = _expect(tree, "NOT", "group")
    return [_group(operand)], lambda ops: Negation(ops[0])


def _binary(keyword: str, node_type: type) -> Callable[[ParseTree], Parts]:
    def handler(tree: ParseTree) -> Parts:
        _, left, right = _expect(tree, keyword, "group", "group")
        return [_group(left), _group(right)], lambda ops: node_type(ops[0], ops[1])

    return handler


def _quantifier(keyword: str, node_type: type) -> Callable[[ParseTree], Parts]:
    def handler(tree: ParseTree) -> Parts:
        _, name, body = _expect(tree, keyword, "name", "group")
        variable = unquote(name)
        return [_group(body)], lambda ops: node_type(variable, ops[0])

    return handler


_FORMULA_BUILDERS: Dict[str, Callable[[ParseTree], Parts]] = {
    "truth": _truth,
    "relation": _relation,
    "not": _not,
    "and": _binary("AND", Conjunction),
    "or": _binary("OR", Disjunction),
    "implies": _binary("IMPLIES", Implication),
    "exists": _quantifier("EXISTS", Exists),
    "forall": _quantifier("FORALL", Forall),
}


def build_formula(tree: ParseTree) -> Formula:
    """
    Convert a formula parse tree into a Formula AST.

    Nodes are visited with an explicit stack, so arbitrarily deep nesting
    of connectives and quantifiers does not consume Python stack frames.

    Args:
        tree: Root of a formula subtree as produced by the grammar.

    Returns:
        The corresponding Formula node.

    Raises:
        ConversionError: If a node has an unexpected label or shape.
    """
    visited = []
    pending = [tree]
    while pending:
        node = pending.pop()
        handler = _FORMULA_BUILDERS.get(node.label)
        if handler is None:
            raise _fail(node, "Unexpected formula node")
        operands, assemble = handler(node)
        visited.append((node, operands, assemble))
        pending.extend(reversed(operands))

    # Pre-order reversed: every node's operands are built before the node
    built: Dict[int, Formula] = {}
    for node, operands, assemble in reversed(visited):
        built[id(node)] = assemble([built[id(op)] for op in operands])
    return built[id(tree)]
