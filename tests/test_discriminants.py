import pytest

from cdrshort._definition import EnumDefinition, VariantDefinition
from cdrshort._resolve import resolve_discriminants, next_discriminant, DISCRIMINANT_MAX, DISCRIMINANT_MIN
from cdrshort.errors import DuplicateDiscriminant, DiscriminantOverflow


def _enum(*variants):
    return EnumDefinition(
        name="E",
        variants=tuple(VariantDefinition(name, value) for name, value in variants)
    )


def _values(*variants):
    return [v.discriminant for v in resolve_discriminants(_enum(*variants))]


def test_next_discriminant():
    assert next_discriminant(None) == 0
    assert next_discriminant(4) == 5
    assert next_discriminant(-1) == 0


def test_gap_filling():
    assert _values(("A", None), ("B", 5), ("C", None)) == [0, 5, 6]
    assert _values(("A", None), ("B", None), ("C", None)) == [0, 1, 2]
    assert _values(("A", -3), ("B", None), ("C", 10), ("D", None)) == [-3, -2, 10, 11]


def test_gap_filling_is_relative_to_previous_value():
    assert _values(("A", 5), ("B", 1), ("C", None)) == [5, 1, 2]


def test_resolved_variants_keep_their_definition():
    resolved = resolve_discriminants(_enum(("A", None), ("B", 7)))
    assert [v.name for v in resolved] == ["A", "B"]
    assert resolved[1].variant.discriminant == 7
    assert not resolved[0].is_catch_all


def test_duplicate_discriminant():
    with pytest.raises(DuplicateDiscriminant) as e:
        _values(("A", 1), ("B", 0), ("C", None))
    assert e.value.location == "E.C"
    assert "A" in e.value.msg


def test_overflow():
    assert _values(("A", DISCRIMINANT_MAX)) == [DISCRIMINANT_MAX]
    assert _values(("A", DISCRIMINANT_MIN), ("B", None)) == [DISCRIMINANT_MIN, DISCRIMINANT_MIN + 1]

    with pytest.raises(DiscriminantOverflow):
        _values(("A", DISCRIMINANT_MAX), ("B", None))

    with pytest.raises(DiscriminantOverflow):
        _values(("A", DISCRIMINANT_MAX + 1))

    with pytest.raises(DiscriminantOverflow):
        _values(("A", DISCRIMINANT_MIN - 1))
