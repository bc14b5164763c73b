"""
Rendering utilities: premises and conclusions as classical sentences.
"""

from .core.terms import A, E, I, O, Role
from .inference.figures import FIGURES

_FORMS = {
    A: "all {s} are {p}",
    E: "no {s} are {p}",
    I: "some {s} are {p}",
    O: "some {s} are not {p}",
}


def sentence(proposition) -> str:
    """
    Render a premise or conclusion as a sentence.

    The first binding is read as the sentence subject and the second as its
    predicate, so (middle:"man", predicate:"mortal") under A reads
    "all man are mortal". Terms are not inflected.
    """
    first, second = proposition.terms
    return _FORMS[proposition.type].format(s=first.term, p=second.term)


def format_argument(major, minor, conclusion) -> str:
    lines = [
        f"  {sentence(major)}.",
        f"  {sentence(minor)}.",
        f"∴ {sentence(conclusion)}.",
    ]
    return "\n".join(lines)


def print_argument(major, minor, conclusion, figure=None):
    """Pretty-print a complete syllogism."""
    print(f"\n{'='*60}")
    if figure is not None:
        print(f"{figure.name} ({figure.mood})")
        print(f"{'-'*60}")
    print(format_argument(major, minor, conclusion))
    print(f"{'='*60}")


def print_figures(figures=FIGURES):
    """Print the figure table."""
    def shape(roles):
        return "(" + ", ".join(r.value for r in roles) + ")"

    print(f"\n{'='*60}")
    print("Recognized figures:")
    print(f"{'='*60}")
    for f in figures:
        print(f"  {f.name:<12} {f.mood}  major {shape(f.major_shape):<20} "
              f"minor {shape(f.minor_shape)}")
    print(f"  (conclusion is always {Role.SUBJECT.value} from the minor, "
          f"{Role.PREDICATE.value} from the major)")
