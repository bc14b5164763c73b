"""
Demonstration registry.

Each demo is a dict describing one classical argument:
    make_premises:  () -> (major, minor)
    expected:       Conclusion, or NoMatchingFigure for a rejected pair
    description:    str
"""

from .core.errors import NoMatchingFigure
from .core.premise import make_premise
from .core.terms import Conclusion, A, E, I, O


def make_barbara():
    """
    all men are mortal.
    all greeks are men.
    ∴ all greeks are mortal.
    """
    major = make_premise("major", [("middle", "man"), ("predicate", "mortal")], A)
    minor = make_premise("minor", [("subject", "greek"), ("middle", "man")], A)
    return major, minor


def make_celarent():
    """
    no birds travel through space.
    all chickens are birds.
    ∴ no chickens travel through space.
    """
    major = make_premise("major", [("middle", "bird"), ("predicate", "travel through space")], E)
    minor = make_premise("minor", [("subject", "chicken"), ("middle", "bird")], A)
    return major, minor


def make_baroco():
    """
    all informative things are useful.
    some websites are useful.
    ∴ some websites are not informative.

    The minor is (particular, affirmative); see the Baroco-like figure.
    """
    major = make_premise("major", [("predicate", "informative thing"), ("middle", "useful")], A)
    minor = make_premise("minor", [("subject", "website"), ("middle", "useful")], I)
    return major, minor


def make_darapti():
    """
    all squares are rectangles.
    all squares are rhombuses.
    ∴ some rhombuses are rectangles.
    """
    major = make_premise("major", [("middle", "square"), ("predicate", "rectangle")], A)
    minor = make_premise("minor", [("middle", "square"), ("subject", "rhombus")], A)
    return major, minor


def make_mismatch():
    """Celarent's shape, but the middle terms differ: bird vs cat."""
    major = make_premise("major", [("middle", "bird"), ("predicate", "travel through space")], E)
    minor = make_premise("minor", [("subject", "chicken"), ("middle", "cat")], A)
    return major, minor


DEMOS = {
    "barbara": {
        "make_premises": make_barbara,
        "expected":      Conclusion.of("greek", "mortal", A),
        "description":   "Barbara (AAA): all greeks are mortal",
    },
    "celarent": {
        "make_premises": make_celarent,
        "expected":      Conclusion.of("chicken", "travel through space", E),
        "description":   "Celarent (EAE): no chickens travel through space",
    },
    "baroco": {
        "make_premises": make_baroco,
        "expected":      Conclusion.of("website", "informative thing", O),
        "description":   "Baroco-like (AIO): some websites are not informative",
    },
    "darapti": {
        "make_premises": make_darapti,
        "expected":      Conclusion.of("rhombus", "rectangle", I),
        "description":   "Darapti (AAI): some rhombuses are rectangles",
    },
    "mismatch": {
        "make_premises": make_mismatch,
        "expected":      NoMatchingFigure,
        "description":   "Middle terms disagree: no conclusion",
    },
}
