"""
Syllogism: a small inference engine for classical term logic.

Build a major and a minor premise, then ask for the conclusion:

    major = make_premise("major", [("middle", "man"), ("predicate", "mortal")], A)
    minor = make_premise("minor", [("subject", "greek"), ("middle", "man")], A)
    conclude(major, minor)
        -> Conclusion(subject "greek", predicate "mortal", A)

Recognized figures: Barbara, Celarent, Baroco-like, Darapti.

Usage:
    python -m syllogism --list
    python -m syllogism --demo barbara
    python -m syllogism --all
"""

from .core.terms import (
    Category, Role, Quantifier, Polarity,
    PropositionType, Binding, Premise, Conclusion,
    A, E, I, O,
)
from .core.errors import (
    SyllogismError, InvalidCategory, InvalidRole, InvalidType, InvalidTerm, NoMatchingFigure,
)
from .core.premise import make_premise, premise
from .core.unification import unify_premises, middle_agrees
from .inference.figures import Figure, FIGURES
from .inference.conclude import match_figure, conclude
from .visualization import sentence, format_argument, print_argument, print_figures

__all__ = [
    "Category", "Role", "Quantifier", "Polarity",
    "PropositionType", "Binding", "Premise", "Conclusion",
    "A", "E", "I", "O",
    "SyllogismError", "InvalidCategory", "InvalidRole", "InvalidType", "InvalidTerm", "NoMatchingFigure",
    "make_premise", "premise",
    "unify_premises", "middle_agrees",
    "Figure", "FIGURES",
    "match_figure", "conclude",
    "sentence", "format_argument", "print_argument", "print_figures",
]
