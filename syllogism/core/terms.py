"""
Core data structures: Binding, PropositionType, Premise, Conclusion.

These are the atoms of the whole system. Nothing in here depends on
the figure table or on how premises are validated.

Terms and roles:
    Term:     any text label -- "man", "mortal", "travel through space"
    Role:     subject | predicate | middle
    Binding:  (role, term)  ->  Binding(Role.MIDDLE, "man")

    A major premise binds {predicate, middle}.
    A minor premise binds {subject, middle}.
    The ORDER of the two bindings is part of the premise: (middle, predicate)
    and (predicate, middle) are different shapes and match different figures.

Proposition types (quantifier x polarity), with their traditional letters:
    A  all S are P        (universal, affirmative)
    E  no S are P         (universal, negative)
    I  some S are P       (particular, affirmative)
    O  some S are not P   (particular, negative)
"""

from dataclasses import dataclass
from enum import Enum


class Category(Enum):
    MAJOR = "major"
    MINOR = "minor"


class Role(Enum):
    SUBJECT = "subject"
    PREDICATE = "predicate"
    MIDDLE = "middle"


class Quantifier(Enum):
    UNIVERSAL = "universal"
    PARTICULAR = "particular"


class Polarity(Enum):
    AFFIRMATIVE = "affirmative"
    NEGATIVE = "negative"


ALLOWED_ROLES = {
    Category.MAJOR: frozenset({Role.PREDICATE, Role.MIDDLE}),
    Category.MINOR: frozenset({Role.SUBJECT, Role.MIDDLE}),
}


@dataclass(frozen=True)
class PropositionType:
    """A (quantifier, polarity) pair. Exactly four exist: A, E, I, O."""
    quantifier: Quantifier
    polarity: Polarity

    @property
    def letter(self) -> str:
        return _LETTERS[(self.quantifier, self.polarity)]

    @property
    def is_universal(self) -> bool:
        return self.quantifier is Quantifier.UNIVERSAL

    @property
    def is_negative(self) -> bool:
        return self.polarity is Polarity.NEGATIVE

    def __iter__(self):
        return iter((self.quantifier, self.polarity))

    def __repr__(self):
        return f"PropositionType({self.quantifier.value}, {self.polarity.value})"


_LETTERS = {
    (Quantifier.UNIVERSAL, Polarity.AFFIRMATIVE): "A",
    (Quantifier.UNIVERSAL, Polarity.NEGATIVE): "E",
    (Quantifier.PARTICULAR, Polarity.AFFIRMATIVE): "I",
    (Quantifier.PARTICULAR, Polarity.NEGATIVE): "O",
}

A = PropositionType(Quantifier.UNIVERSAL, Polarity.AFFIRMATIVE)
E = PropositionType(Quantifier.UNIVERSAL, Polarity.NEGATIVE)
I = PropositionType(Quantifier.PARTICULAR, Polarity.AFFIRMATIVE)
O = PropositionType(Quantifier.PARTICULAR, Polarity.NEGATIVE)

PROPOSITION_TYPES = (A, E, I, O)


@dataclass(frozen=True)
class Binding:
    """A term standing in one role of a premise or conclusion."""
    role: Role
    term: str

    def __iter__(self):
        return iter((self.role, self.term))

    def __repr__(self):
        return f"{self.role.value}:{self.term!r}"


@dataclass(frozen=True)
class Premise:
    """
    One premise of a syllogism.

    Build it with make_premise(); the constructor itself does not validate.
    `terms` keeps the two bindings in the order they were given.
    """
    category: Category
    terms: tuple
    type: PropositionType

    @property
    def shape(self) -> tuple:
        """The ordered roles, e.g. (Role.MIDDLE, Role.PREDICATE)."""
        return tuple(b.role for b in self.terms)

    def term(self, role: Role) -> str:
        for binding in self.terms:
            if binding.role is role:
                return binding.term
        raise KeyError(role)

    @property
    def name(self):
        bindings = ", ".join(repr(b) for b in self.terms)
        return f"{self.category.value}[{self.type.letter}]({bindings})"

    def __repr__(self):
        return f"Premise({self.name})"


@dataclass(frozen=True)
class Conclusion:
    """The result of a syllogism: always (subject, predicate) in that order."""
    terms: tuple
    type: PropositionType

    @classmethod
    def of(cls, subject: str, predicate: str, type: PropositionType) -> "Conclusion":
        return cls(
            terms=(Binding(Role.SUBJECT, subject), Binding(Role.PREDICATE, predicate)),
            type=type,
        )

    @property
    def subject(self) -> str:
        return self.terms[0].term

    @property
    def predicate(self) -> str:
        return self.terms[1].term

    @property
    def name(self):
        return f"conclusion[{self.type.letter}]({self.terms[0]!r}, {self.terms[1]!r})"

    def __repr__(self):
        return f"Conclusion({self.name})"
