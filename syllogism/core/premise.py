"""
Premise construction.

make_premise() is the only way to build a valid Premise. It checks, in order:

    1. category   -- major or minor                  else InvalidCategory
    2. roles      -- exactly the category's role set  else InvalidRole
    3. type       -- one of A, E, I, O                else InvalidType
    4. terms      -- every term is text               else InvalidTerm

Nothing is built until all four checks pass.
"""

import logging

from .errors import InvalidCategory, InvalidRole, InvalidTerm, InvalidType
from .terms import (
    ALLOWED_ROLES, A,
    Binding, Category, Polarity, Premise, PropositionType, Quantifier, Role,
)

logger = logging.getLogger(__name__)


def _coerce(enum_cls, value):
    """Accept an enum member or its string value. Returns None otherwise."""
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        try:
            return enum_cls(value)
        except ValueError:
            return None
    return None


def as_category(category) -> Category:
    result = _coerce(Category, category)
    if result is None:
        raise InvalidCategory(
            f"category must be 'major' or 'minor', got {category!r}",
            context={"category": category},
        )
    return result


def as_bindings(category: Category, terms) -> tuple:
    """
    Turn `terms` into a tuple of Bindings, preserving order.

    The role set must equal ALLOWED_ROLES[category]: two bindings, no
    duplicates, no foreign roles.
    """
    allowed = ALLOWED_ROLES[category]
    context = {"category": category.value, "terms": terms,
               "allowed": sorted(r.value for r in allowed)}

    # A mapping has no order; only a sequence of pairs can carry the shape.
    if isinstance(terms, (dict, str)):
        raise InvalidRole(f"terms must be an ordered pair of (role, term) bindings, got {terms!r}",
                          context=context)
    try:
        pairs = list(terms)
    except TypeError:
        raise InvalidRole(f"terms must be an ordered pair of (role, term) bindings, got {terms!r}",
                          context=context) from None

    bindings = []
    for pair in pairs:
        try:
            role, term = pair
        except (TypeError, ValueError):
            raise InvalidRole(f"binding must be a (role, term) pair, got {pair!r}",
                              context=context) from None
        coerced = _coerce(Role, role)
        if coerced is None:
            raise InvalidRole(f"unknown role {role!r}", context=context)
        bindings.append(Binding(coerced, term))

    roles = [b.role for b in bindings]
    if len(roles) != 2 or set(roles) != allowed:
        raise InvalidRole(
            f"{category.value} premise needs roles "
            f"{sorted(r.value for r in allowed)}, got {[r.value for r in roles]}",
            context=context,
        )
    return tuple(bindings)


def as_type(type) -> PropositionType:
    # Unordered containers cannot say which member is the quantifier.
    if isinstance(type, (dict, set, frozenset, str)):
        quantifier = polarity = None
    else:
        try:
            quantifier, polarity = type
        except (TypeError, ValueError):
            quantifier = polarity = None
    quantifier = _coerce(Quantifier, quantifier)
    polarity = _coerce(Polarity, polarity)
    if quantifier is not None and polarity is not None:
        return PropositionType(quantifier, polarity)
    raise InvalidType(
        f"type must be a (quantifier, polarity) pair, got {type!r}",
        context={"type": type},
    )


def check_terms(bindings: tuple) -> None:
    for binding in bindings:
        if not isinstance(binding.term, str):
            raise InvalidTerm(
                f"term for {binding.role.value} must be text, got {binding.term!r}",
                context={"role": binding.role.value, "term": binding.term},
            )


def make_premise(category, terms, type) -> Premise:
    """
    Build a premise from a category, an ordered pair of (role, term)
    bindings, and a proposition type.

        make_premise("major", [("middle", "man"), ("predicate", "mortal")],
                     ("universal", "affirmative"))

    The bindings keep the order given; that order decides which figures
    the premise can take part in.
    """
    category = as_category(category)
    bindings = as_bindings(category, terms)
    type = as_type(type)
    check_terms(bindings)
    result = Premise(category=category, terms=bindings, type=type)
    logger.debug("built %r", result)
    return result


def premise(category, first, second, type=A) -> Premise:
    """
    Positional form using each category's conventional order:

        major -> (middle, predicate)
        minor -> (subject, middle)
    """
    category = as_category(category)
    if category is Category.MAJOR:
        roles = (Role.MIDDLE, Role.PREDICATE)
    else:
        roles = (Role.SUBJECT, Role.MIDDLE)
    return make_premise(category, list(zip(roles, (first, second))), type)
