"""
The table of recognized syllogistic figures.

Each figure names a major shape and type, a minor shape and type, and the
type of the conclusion they yield. Shapes are ordered role pairs, so
Barbara's minor (subject, middle) and Darapti's minor (middle, subject)
are different keys even though both carry the same roles.

    Figure       major                  minor                  conclusion
    Barbara      (M, P) A               (S, M) A               A
    Celarent     (M, P) E               (S, M) A               E
    Baroco-like  (P, M) A               (S, M) I               O
    Darapti      (M, P) A               (M, S) A               I

The table is checked when this module is imported: a figure with a bad
shape, an unknown type, or a key that another figure already uses raises
ValueError before anything can consult it.
"""

from dataclasses import dataclass

from ..core.terms import (
    ALLOWED_ROLES, PROPOSITION_TYPES, A, E, I, O,
    Category, PropositionType, Role,
)

S, P, M = Role.SUBJECT, Role.PREDICATE, Role.MIDDLE


@dataclass(frozen=True)
class Figure:
    """One row of the table."""
    name: str
    major_shape: tuple
    major_type: PropositionType
    minor_shape: tuple
    minor_type: PropositionType
    conclusion_type: PropositionType

    @property
    def key(self) -> tuple:
        return (self.major_shape, self.major_type, self.minor_shape, self.minor_type)

    @property
    def mood(self) -> str:
        """Traditional three-letter mood, e.g. 'AAA' for Barbara."""
        return self.major_type.letter + self.minor_type.letter + self.conclusion_type.letter

    def __repr__(self):
        return f"Figure({self.name}, {self.mood})"


FIGURES = (
    Figure("Barbara",     (M, P), A, (S, M), A, A),
    Figure("Celarent",    (M, P), E, (S, M), A, E),
    Figure("Baroco-like", (P, M), A, (S, M), I, O),
    Figure("Darapti",     (M, P), A, (M, S), A, I),
)


def figure_key(major, minor) -> tuple:
    """The lookup key a pair of premises presents to the table."""
    return (major.shape, major.type, minor.shape, minor.type)


def check_table(figures) -> None:
    """Raise ValueError if any figure is malformed or two share a key."""
    seen = {}
    for figure in figures:
        for category, shape in ((Category.MAJOR, figure.major_shape),
                                (Category.MINOR, figure.minor_shape)):
            if len(shape) != 2 or set(shape) != ALLOWED_ROLES[category]:
                raise ValueError(
                    f"{figure.name}: {category.value} shape {shape} is not an "
                    f"ordering of {sorted(r.value for r in ALLOWED_ROLES[category])}"
                )
        for label, t in (("major", figure.major_type),
                         ("minor", figure.minor_type),
                         ("conclusion", figure.conclusion_type)):
            if t not in PROPOSITION_TYPES:
                raise ValueError(f"{figure.name}: {label} type {t!r} is not A, E, I or O")
        if figure.key in seen:
            raise ValueError(f"{figure.name} and {seen[figure.key]} share the same premises")
        seen[figure.key] = figure.name


check_table(FIGURES)

FIGURES_BY_NAME = {f.name: f for f in FIGURES}
