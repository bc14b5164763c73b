from .terms import (
    Category, Role, Quantifier, Polarity,
    PropositionType, Binding, Premise, Conclusion,
    ALLOWED_ROLES, PROPOSITION_TYPES, A, E, I, O,
)
from .errors import (
    SyllogismError, InvalidCategory, InvalidRole, InvalidType, InvalidTerm, NoMatchingFigure,
)
from .premise import make_premise, premise
from .unification import bind, unify_premise, unify_premises, middle_agrees

__all__ = [
    "Category", "Role", "Quantifier", "Polarity",
    "PropositionType", "Binding", "Premise", "Conclusion",
    "ALLOWED_ROLES", "PROPOSITION_TYPES", "A", "E", "I", "O",
    "SyllogismError", "InvalidCategory", "InvalidRole", "InvalidType", "InvalidTerm", "NoMatchingFigure",
    "make_premise", "premise",
    "bind", "unify_premise", "unify_premises", "middle_agrees",
]
