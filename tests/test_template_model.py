"""Template node construction, invariants and type guards."""

import dataclasses

import pytest

from i18nasset.enums import TemplateKind
from i18nasset.template import ArgRef, Literal, PlainTemplate, StructuredTemplate


class TestFragments:
    """Literal and ArgRef fragment nodes."""

    def test_argref_accepts_zero_and_positive(self) -> None:
        assert ArgRef(0).index == 0
        assert ArgRef(7).index == 7

    def test_argref_rejects_negative_index(self) -> None:
        with pytest.raises(ValueError, match="must be >= 0"):
            ArgRef(-1)

    @pytest.mark.parametrize("index", [True, 1.0, "1", None])
    def test_argref_rejects_non_int_index(self, index: object) -> None:
        with pytest.raises(TypeError, match="must be int"):
            ArgRef(index)  # type: ignore[arg-type]

    def test_fragments_are_frozen(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            Literal("a").text = "b"  # type: ignore[misc]

    def test_guards_discriminate(self) -> None:
        assert Literal.guard(Literal("x"))
        assert not Literal.guard(ArgRef(0))
        assert ArgRef.guard(ArgRef(0))
        assert not ArgRef.guard("0")


class TestTemplates:
    """PlainTemplate and StructuredTemplate variants."""

    def test_kind_tags(self) -> None:
        assert PlainTemplate("x").kind is TemplateKind.PLAIN
        assert StructuredTemplate(()).kind is TemplateKind.STRUCTURED
        assert str(TemplateKind.PLAIN) == "plain"

    def test_argument_indices(self) -> None:
        template = StructuredTemplate((ArgRef(1), Literal(" and "), ArgRef(1), ArgRef(3)))
        assert template.argument_indices == frozenset({1, 3})

    def test_argument_indices_literal_only(self) -> None:
        assert StructuredTemplate((Literal("text"),)).argument_indices == frozenset()

    def test_equality_is_structural(self) -> None:
        assert PlainTemplate("a") == PlainTemplate("a")
        assert StructuredTemplate((Literal("a"), ArgRef(0))) == StructuredTemplate(
            (Literal("a"), ArgRef(0))
        )
        assert PlainTemplate("a") != StructuredTemplate((Literal("a"),))

    def test_templates_are_hashable(self) -> None:
        templates = {PlainTemplate("a"), PlainTemplate("a"), StructuredTemplate((ArgRef(0),))}
        assert len(templates) == 2

    def test_guards_discriminate(self) -> None:
        assert PlainTemplate.guard(PlainTemplate(""))
        assert not PlainTemplate.guard(StructuredTemplate(()))
        assert StructuredTemplate.guard(StructuredTemplate(()))
        assert not StructuredTemplate.guard(None)
