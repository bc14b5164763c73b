"""
Conclusion resolution: the inference rule of the system.

Given a major and a minor premise, find the figure whose shapes and types
they present, unify the two premises over their shared middle role, and
produce a conclusion whose subject comes from the minor premise and whose
predicate comes from the major premise.

If no figure fits, or one fits but the middle terms differ, there is no
conclusion.
"""

import logging

from ..core.errors import NoMatchingFigure
from ..core.terms import Conclusion, Premise, Role
from ..core.unification import unify_premises
from .figures import FIGURES, Figure, figure_key

logger = logging.getLogger(__name__)


def match_figure(major: Premise, minor: Premise, figures=FIGURES) -> Figure:
    """
    Return the first figure that accepts (major, minor).

    A figure accepts the pair when both shapes match in order, both types
    match, and the middle term is the same value in both premises.
    Raises NoMatchingFigure otherwise.
    """
    key = figure_key(major, minor)
    sub = unify_premises(major, minor)

    for figure in figures:
        if figure.key != key:
            continue
        if sub is None:
            logger.debug(
                "%s fits the shape but the middle terms differ: %r vs %r",
                figure.name, major.term(Role.MIDDLE), minor.term(Role.MIDDLE),
            )
            continue
        logger.debug("matched %s (%s) for %r + %r", figure.name, figure.mood, major, minor)
        return figure

    context = {
        "major": major.name,
        "minor": minor.name,
        "middle_agrees": sub is not None,
    }
    logger.debug("no figure for %r + %r", major, minor)
    raise NoMatchingFigure(
        f"no figure concludes from {major.name} and {minor.name}",
        context=context,
    )


def conclude(major: Premise, minor: Premise) -> Conclusion:
    """
    Derive the conclusion of a syllogism.

        major  (middle:"man", predicate:"mortal")  A
        minor  (subject:"greek", middle:"man")     A
        ->     (subject:"greek", predicate:"mortal") A
    """
    return conclusion_for(match_figure(major, minor), major, minor)


def conclusion_for(figure: Figure, major: Premise, minor: Premise) -> Conclusion:
    """Build the conclusion of a figure already matched by match_figure()."""
    return Conclusion.of(
        subject=minor.term(Role.SUBJECT),
        predicate=major.term(Role.PREDICATE),
        type=figure.conclusion_type,
    )
