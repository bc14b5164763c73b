"""
Property-based and unit tests for conclusion resolution.

Core claims:
    - The four classical scenarios yield their expected conclusions
    - Subject comes from the minor premise, predicate from the major
    - Differing middle terms are rejected with NoMatchingFigure
    - Binding order matters: the wrong order never matches silently
    - conclude is deterministic
    - Baroco-like accepts only a (particular, affirmative) minor
"""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from syllogism.core.errors import NoMatchingFigure
from syllogism.core.premise import make_premise
from syllogism.core.terms import Conclusion, Role, PROPOSITION_TYPES, A, E, I, O
from syllogism.inference.conclude import conclude, conclusion_for, match_figure
from syllogism.inference.figures import FIGURES, FIGURES_BY_NAME


# ── Generators ──────────────────────────────────────────────────────────────

terms = st.text(min_size=1, max_size=12)
types = st.sampled_from(PROPOSITION_TYPES)


@st.composite
def figure_instances(draw, same_middle=True):
    """A figure plus a (major, minor) pair built in its shape and types."""
    figure = draw(st.sampled_from(FIGURES))
    middle = draw(terms)
    minor_middle = middle if same_middle else draw(terms.filter(lambda t: t != middle))
    values = {Role.SUBJECT: draw(terms), Role.PREDICATE: draw(terms)}
    major = make_premise(
        "major",
        [(r, middle if r is Role.MIDDLE else values[r]) for r in figure.major_shape],
        figure.major_type,
    )
    minor = make_premise(
        "minor",
        [(r, minor_middle if r is Role.MIDDLE else values[r]) for r in figure.minor_shape],
        figure.minor_type,
    )
    return figure, major, minor


def _swap(p):
    """The same premise with its two bindings in the other order."""
    return make_premise(p.category, list(reversed(p.terms)), p.type)


# ── Classical scenarios ─────────────────────────────────────────────────────

class TestScenarios:
    def test_barbara(self):
        """
        all men are mortal.
        all greeks are men.
        ∴ all greeks are mortal.
        """
        major = make_premise("major", [("middle", "man"), ("predicate", "mortal")],
                             ("universal", "affirmative"))
        minor = make_premise("minor", [("subject", "greek"), ("middle", "man")],
                             ("universal", "affirmative"))
        conclusion = conclude(major, minor)
        assert conclusion == Conclusion.of("greek", "mortal", A)
        assert conclusion.terms[0].role is Role.SUBJECT
        assert conclusion.terms[1].role is Role.PREDICATE

    def test_celarent(self):
        major = make_premise("major", [("middle", "bird"), ("predicate", "travel through space")],
                             ("universal", "negative"))
        minor = make_premise("minor", [("subject", "chicken"), ("middle", "bird")],
                             ("universal", "affirmative"))
        assert conclude(major, minor) == Conclusion.of("chicken", "travel through space", E)

    def test_baroco_like(self):
        major = make_premise("major", [("predicate", "informative thing"), ("middle", "useful")],
                             ("universal", "affirmative"))
        minor = make_premise("minor", [("subject", "website"), ("middle", "useful")],
                             ("particular", "affirmative"))
        assert conclude(major, minor) == Conclusion.of("website", "informative thing", O)

    def test_darapti(self):
        major = make_premise("major", [("middle", "square"), ("predicate", "rectangle")],
                             ("universal", "affirmative"))
        minor = make_premise("minor", [("middle", "square"), ("subject", "rhombus")],
                             ("universal", "affirmative"))
        conclusion = conclude(major, minor)
        assert conclusion == Conclusion.of("rhombus", "rectangle", I)
        assert conclusion.subject == "rhombus"
        assert conclusion.predicate == "rectangle"

    def test_middle_mismatch(self):
        major = make_premise("major", [("middle", "bird"), ("predicate", "travel through space")],
                             ("universal", "negative"))
        minor = make_premise("minor", [("subject", "chicken"), ("middle", "cat")],
                             ("universal", "affirmative"))
        with pytest.raises(NoMatchingFigure) as info:
            conclude(major, minor)
        assert info.value.context["middle_agrees"] is False


class TestMatchFigure:
    def test_reports_figure(self):
        major = make_premise("major", [("middle", "square"), ("predicate", "rectangle")], A)
        minor = make_premise("minor", [("middle", "square"), ("subject", "rhombus")], A)
        assert match_figure(major, minor) is FIGURES_BY_NAME["Darapti"]

    def test_conclusion_for_matched_figure(self):
        major = make_premise("major", [("middle", "bird"), ("predicate", "fly")], E)
        minor = make_premise("minor", [("subject", "chicken"), ("middle", "bird")], A)
        figure = match_figure(major, minor)
        assert conclusion_for(figure, major, minor) == conclude(major, minor)
        assert conclusion_for(figure, major, minor) == Conclusion.of("chicken", "fly", E)

    def test_unknown_combination(self):
        # EE: two negative premises conclude nothing
        major = make_premise("major", [("middle", "fish"), ("predicate", "bird")], E)
        minor = make_premise("minor", [("subject", "cat"), ("middle", "fish")], E)
        with pytest.raises(NoMatchingFigure) as info:
            match_figure(major, minor)
        assert info.value.context["middle_agrees"] is True

    def test_premises_in_wrong_slots(self):
        major = make_premise("major", [("middle", "man"), ("predicate", "mortal")], A)
        minor = make_premise("minor", [("subject", "greek"), ("middle", "man")], A)
        with pytest.raises(NoMatchingFigure):
            conclude(minor, major)


# ── Properties ──────────────────────────────────────────────────────────────

class TestProperties:
    @given(figure_instances())
    def test_every_figure_resolves(self, instance):
        figure, major, minor = instance
        assert match_figure(major, minor) is figure
        conclusion = conclude(major, minor)
        assert conclusion.type == figure.conclusion_type
        assert conclusion.subject == minor.term(Role.SUBJECT)
        assert conclusion.predicate == major.term(Role.PREDICATE)

    @given(figure_instances(same_middle=False))
    def test_middle_mismatch_always_rejected(self, instance):
        _, major, minor = instance
        with pytest.raises(NoMatchingFigure):
            conclude(major, minor)

    @given(figure_instances())
    def test_deterministic(self, instance):
        _, major, minor = instance
        assert conclude(major, minor) == conclude(major, minor)

    @given(figure_instances(same_middle=False))
    def test_deterministic_rejection(self, instance):
        _, major, minor = instance
        errors = []
        for _ in range(2):
            with pytest.raises(NoMatchingFigure) as info:
                conclude(major, minor)
            errors.append((type(info.value), str(info.value), info.value.context))
        assert errors[0] == errors[1]

    @given(figure_instances())
    def test_swapped_major_changes_match(self, instance):
        figure, major, minor = instance
        swapped = _swap(major)
        try:
            other = match_figure(swapped, minor)
        except NoMatchingFigure:
            return
        assert other is not figure
        assert other.major_shape == swapped.shape

    @given(figure_instances())
    def test_swapped_minor_changes_match(self, instance):
        figure, major, minor = instance
        swapped = _swap(minor)
        try:
            other = match_figure(major, swapped)
        except NoMatchingFigure:
            return
        assert other is not figure
        assert other.minor_shape == swapped.shape

    @given(terms, terms, terms, types, types)
    def test_conclusion_roles_fixed(self, s, m, p, t1, t2):
        major = make_premise("major", [("middle", m), ("predicate", p)], t1)
        minor = make_premise("minor", [("subject", s), ("middle", m)], t2)
        try:
            conclusion = conclude(major, minor)
        except NoMatchingFigure:
            return
        assert [b.role for b in conclusion.terms] == [Role.SUBJECT, Role.PREDICATE]
        assert (conclusion.subject, conclusion.predicate) == (s, p)


# ── Order significance ──────────────────────────────────────────────────────

class TestOrderSignificance:
    def test_barbara_minor_reversed_is_darapti(self):
        major = make_premise("major", [("middle", "man"), ("predicate", "mortal")], A)
        minor = make_premise("minor", [("middle", "man"), ("subject", "greek")], A)
        assert match_figure(major, minor).name == "Darapti"
        assert conclude(major, minor).type == I

    def test_barbara_major_reversed_is_not_barbara(self):
        major = make_premise("major", [("predicate", "mortal"), ("middle", "man")], A)
        minor = make_premise("minor", [("subject", "greek"), ("middle", "man")], A)
        with pytest.raises(NoMatchingFigure):
            conclude(major, minor)

    def test_celarent_major_reversed(self):
        major = make_premise("major", [("predicate", "fly"), ("middle", "bird")], E)
        minor = make_premise("minor", [("subject", "chicken"), ("middle", "bird")], A)
        with pytest.raises(NoMatchingFigure):
            conclude(major, minor)

    def test_baroco_major_in_conventional_order(self):
        major = make_premise("major", [("middle", "useful"), ("predicate", "informative")], A)
        minor = make_premise("minor", [("subject", "website"), ("middle", "useful")], I)
        with pytest.raises(NoMatchingFigure):
            conclude(major, minor)


# ── Baroco-like minor type ──────────────────────────────────────────────────

class TestBarocoMinorType:
    """
    Only (particular, affirmative) is accepted for the Baroco-like minor.
    Older variants of this argument used (particular, negative); that form
    is deliberately rejected.
    """

    def _major(self):
        return make_premise("major", [("predicate", "informative thing"), ("middle", "useful")], A)

    def test_particular_affirmative_accepted(self):
        minor = make_premise("minor", [("subject", "website"), ("middle", "useful")], I)
        assert conclude(self._major(), minor).type == O

    def test_particular_negative_rejected(self):
        minor = make_premise("minor", [("subject", "website"), ("middle", "useful")], O)
        with pytest.raises(NoMatchingFigure):
            conclude(self._major(), minor)
