"""
Abstract syntax tree node definitions for first-order formulas.

Defines immutable, hashable AST nodes for terms (variables, function
applications) and formulas: truth constants, relations over terms,
Boolean connectives (negation, conjunction, disjunction, implication)
and the two quantifiers.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import FrozenSet, Iterable, Tuple


# === Terms ===


class Term(ABC):
    """
    Base class for first-order terms.

    Terms are immutable and compare structurally.
    """

    @abstractmethod
    def variables(self) -> FrozenSet[str]:
        """Return the names of all variables occurring in the term."""

    @abstractmethod
    def __eq__(self, other: object) -> bool:
        """Check equality with another term."""

    @abstractmethod
    def __hash__(self) -> int:
        """Return hash for use in sets and dicts."""


class Var(Term):
    """
    A named variable, ``Var "x"``.

    Attributes:
        name: The variable identifier.
    """

    __slots__ = ("name",)

    def __init__(self, name: str) -> None:
        self.name = name

    def variables(self) -> FrozenSet[str]:
        return frozenset({self.name})

    def __repr__(self) -> str:
        return f"Var({self.name!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Var):
            return NotImplemented
        return self.name == other.name

    def __hash__(self) -> int:
        return hash(("Var", self.name))


class Fun(Term):
    """
    A function application, ``Fun "f" [Var "x", Var "y"]``.

    Attributes:
        name: The function symbol.
        args: Argument terms, in order. May be empty (a constant).
    """

    __slots__ = ("name", "args")

    def __init__(self, name: str, args: Iterable[Term] = ()) -> None:
        self.name = name
        self.args: Tuple[Term, ...] = tuple(args)

    def variables(self) -> FrozenSet[str]:
        return frozenset().union(*(arg.variables() for arg in self.args))

    def __repr__(self) -> str:
        return f"Fun({self.name!r}, {list(self.args)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Fun):
            return NotImplemented
        return self.name == other.name and self.args == other.args

    def __hash__(self) -> int:
        return hash(("Fun", self.name, self.args))


# === Formulas ===


class Formula(ABC):
    """
    Base class for all formula nodes.

    All formula nodes are immutable and support equality comparison
    and hashing for use in sets and dictionaries. Each node owns its
    children; trees never share or cycle.
    """

    @abstractmethod
    def subformulas(self) -> FrozenSet[Formula]:
        """Return set of all subformulas including self."""

    @abstractmethod
    def __repr__(self) -> str:
        """Return constructor-style representation of the formula."""

    @abstractmethod
    def __eq__(self, other: object) -> bool:
        """Check equality with another formula."""

    @abstractmethod
    def __hash__(self) -> int:
        """Return hash for use in sets and dicts."""


# === Constants ===


class TrueConstant(Formula):
    """Represents the constant ``T``."""

    def subformulas(self) -> FrozenSet[Formula]:
        return frozenset({self})

    def __repr__(self) -> str:
        return "TrueConstant()"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TrueConstant):
            return NotImplemented
        return True

    def __hash__(self) -> int:
        return hash(("TrueConstant",))


class FalseConstant(Formula):
    """Represents the constant ``F``."""

    def subformulas(self) -> FrozenSet[Formula]:
        return frozenset({self})

    def __repr__(self) -> str:
        return "FalseConstant()"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FalseConstant):
            return NotImplemented
        return True

    def __hash__(self) -> int:
        return hash(("FalseConstant",))


# === Atomic ===


class Relation(Formula):
    """
    Represents a predicate applied to terms, ``Rel "D" [Var "x"]``.

    Attributes:
        name: The relation symbol.
        args: Argument terms, in order. Empty for a zero-ary relation.
    """

    __slots__ = ("name", "args")

    def __init__(self, name: str, args: Iterable[Term] = ()) -> None:
        self.name = name
        self.args: Tuple[Term, ...] = tuple(args)

    @property
    def arity(self) -> int:
        return len(self.args)

    def subformulas(self) -> FrozenSet[Formula]:
        return frozenset({self})

    def __repr__(self) -> str:
        return f"Relation({self.name!r}, {list(self.args)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Relation):
            return NotImplemented
        return self.name == other.name and self.args == other.args

    def __hash__(self) -> int:
        return hash(("Relation", self.name, self.args))


# === Unary Operators ===


class Negation(Formula):
    """
    Represents ``Not (phi)``.

    Attributes:
        operand: The formula being negated.
    """

    __slots__ = ("operand",)

    def __init__(self, operand: Formula) -> None:
        self.operand = operand

    def subformulas(self) -> FrozenSet[Formula]:
        return frozenset({self}) | self.operand.subformulas()

    def __repr__(self) -> str:
        return f"Negation({self.operand!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Negation):
            return NotImplemented
        return self.operand == other.operand

    def __hash__(self) -> int:
        return hash(("Negation", self.operand))


# === Binary Operator Base ===


class _BinaryOp(Formula):
    """Base class for binary connectives (not part of public API)."""

    __slots__ = ("left", "right")

    def __init__(self, left: Formula, right: Formula) -> None:
        self.left = left
        self.right = right

    def subformulas(self) -> FrozenSet[Formula]:
        return frozenset({self}) | self.left.subformulas() | self.right.subformulas()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.left!r}, {self.right!r})"

    def __eq__(self, other: object) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return self.left == other.left and self.right == other.right

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.left, self.right))


# === Binary Operators ===


class Conjunction(_BinaryOp):
    """
    Represents ``And (phi) (psi)``.

    Attributes:
        left: Left operand.
        right: Right operand.
    """


class Disjunction(_BinaryOp):
    """
    Represents ``Or (phi) (psi)``.

    Attributes:
        left: Left operand.
        right: Right operand.
    """


class Implication(_BinaryOp):
    """
    Represents ``Implies (phi) (psi)``.

    Attributes:
        left: Antecedent (the "if" part).
        right: Consequent (the "then" part).
    """


# === Quantifiers ===


class _Quantifier(Formula):
    """Base class for quantifiers binding one variable (not part of public API)."""

    __slots__ = ("variable", "body")

    def __init__(self, variable: str, body: Formula) -> None:
        self.variable = variable
        self.body = body

    def subformulas(self) -> FrozenSet[Formula]:
        return frozenset({self}) | self.body.subformulas()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.variable!r}, {self.body!r})"

    def __eq__(self, other: object) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return self.variable == other.variable and self.body == other.body

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.variable, self.body))


class Exists(_Quantifier):
    """
    Represents ``Exists "x" (phi)``.

    Attributes:
        variable: The bound variable name.
        body: The quantified sub-formula.
    """


class Forall(_Quantifier):
    """
    Represents ``Forall "x" (phi)``.

    Attributes:
        variable: The bound variable name.
        body: The quantified sub-formula.
    """


# Short names matching the surface keywords
Not = Negation
And = Conjunction
Or = Disjunction
Implies = Implication
