"""
Role unification across two premises.

The premises of a syllogism are linked through the role they share. To
unify them is to find one substitution that every binding in both
premises agrees with, or to report that no such substitution exists.

Substitutions are plain dicts from Role to term:

    major = (middle:"man", predicate:"mortal")
    minor = (subject:"greek", middle:"man")
    unify_premises(major, minor)
        -> {MIDDLE: "man", PREDICATE: "mortal", SUBJECT: "greek"}

    minor = (subject:"greek", middle:"dog")
    unify_premises(major, minor)  -> None

Terms are opaque: they unify only when equal by value.
"""

from .terms import Premise, Role


def bind(sub: dict, role: Role, term):
    """
    Extend substitution sub with role -> term.

    Returns the updated substitution (a new dict), or None if sub already
    binds role to a different term.
    """
    if role in sub:
        return sub if sub[role] == term else None
    sub = dict(sub)
    sub[role] = term
    return sub


def unify_premise(premise: Premise, sub=None):
    """Fold every binding of premise into sub. Returns None on conflict."""
    if sub is None:
        sub = {}
    for binding in premise.terms:
        sub = bind(sub, binding.role, binding.term)
        if sub is None:
            return None
    return sub


def unify_premises(major: Premise, minor: Premise):
    """One substitution covering both premises, or None."""
    sub = unify_premise(major)
    if sub is None:
        return None
    return unify_premise(minor, sub)


def middle_agrees(major: Premise, minor: Premise) -> bool:
    """Do both premises bind the middle role to the same term?"""
    return unify_premises(major, minor) is not None
