import pytest
from enum import auto

from cdrshort import ShortEnum, ReprChoice, InvalidDiscriminant, make_short_enum, derive_codec
from cdrshort.annotations import other
from cdrshort.errors import HasFields, Empty, MissingRepresentation, MultipleCatchAll, DuplicateDiscriminant, \
    UnsupportedRange, UnsupportedRepresentation, ShortEnumError, DiscriminantOverflow

import support_modules.test_classes as tc


def test_round_trip():
    for _type in [tc.SmallPrime, tc.SmallPrimeU8, tc.SmallPrimeU16, tc.Gaps, tc.Signed, tc.Wide, tc.Status, tc.Single]:
        codec = _type.__idl__.codec
        for member in _type:
            assert codec.decode(codec.encode(member)) is member
            assert codec.encode(member) == member.value
            assert member.encode() == member.value


def test_implicit_values_follow_previous():
    assert [m.value for m in tc.Gaps] == [0, 5, 6]
    assert tc.Status.Unknown.value == 4


def test_inferred_repr():
    assert tc.SmallPrime.__idl__.codec.repr == ReprChoice.UInt8
    assert tc.Wide.__idl__.codec.repr == ReprChoice.UInt16
    assert tc.Signed.__idl__.codec.repr == ReprChoice.Int8


def test_declared_repr_is_kept():
    assert tc.SmallPrimeU8.__idl__.codec.repr == ReprChoice.UInt8
    assert tc.SmallPrimeU16.__idl__.codec.repr == ReprChoice.UInt16
    assert tc.Single.__idl__.codec.repr == ReprChoice.Int32


def test_catch_all_decode():
    codec = tc.Status.__idl__.codec
    assert codec.decode(2) is tc.Status.Two
    assert codec.decode(99) is tc.Status.Unknown
    assert tc.Status(3) is tc.Status.Three
    assert tc.Status(99) is tc.Status.Unknown


def test_invalid_value():
    with pytest.raises(InvalidDiscriminant) as e:
        tc.Pair.__idl__.codec.decode(99)
    assert str(e.value) == "invalid value: 99, expected 2 or 3"
    assert e.value.value == 99
    assert e.value.expected == (2, 3)

    with pytest.raises(InvalidDiscriminant, match="invalid value: 9, expected one of: 2, 3, 5, 7"):
        tc.SmallPrime(9)

    with pytest.raises(InvalidDiscriminant, match="invalid value: 1, expected -7"):
        tc.Single(1)


def test_lookup_by_non_integer_is_a_plain_value_error():
    with pytest.raises(ValueError) as e:
        tc.Status("Two")
    assert not isinstance(e.value, InvalidDiscriminant)


def test_class_repr_and_typename():
    assert repr(tc.SmallPrime) == "SmallPrime(ShortEnum, idl_typename='SmallPrime')"
    assert repr(ShortEnum) == "ShortEnum"
    assert tc.Tagged.__idl__.codec.typename == "wire::Tagged"


def test_unrelated_annotations_are_ignored():
    assert not tc.Tagged.__idl__.codec.has_catch_all
    with pytest.raises(InvalidDiscriminant):
        tc.Tagged(3)


def test_construction_errors():
    with pytest.raises(MultipleCatchAll):
        class Twice(ShortEnum, repr="C"):
            A = 1
            B = 2
            other("A")
            other("B")

    with pytest.raises(HasFields) as e:
        class Planet(ShortEnum, repr="C"):
            Mercury = (3.303e+23, 2.4397e6)
    assert e.value.location == "Planet.Mercury"

    with pytest.raises(MissingRepresentation):
        class NoRepr(ShortEnum):
            A = 1

    with pytest.raises(UnsupportedRepresentation):
        class BadRepr(ShortEnum, repr="u8"):
            A = 1

    with pytest.raises(UnsupportedRange):
        class TooWide(ShortEnum, repr="C"):
            A = 0
            B = 1 << 32

    with pytest.raises(UnsupportedRange):
        class TooWideSigned(ShortEnum, repr="C"):
            A = -1
            B = 1 << 31

    with pytest.raises(UnsupportedRange):
        class DoesNotFit(ShortEnum, repr="uint8"):
            A = 300

    with pytest.raises(DuplicateDiscriminant) as e:
        class Alias(ShortEnum, repr="C"):
            A = 1
            B = 1
    assert e.value.location == "Alias.B"


def test_construction_errors_are_type_errors():
    with pytest.raises(TypeError):
        class NoRepr(ShortEnum):
            A = 1
    assert issubclass(MultipleCatchAll, ShortEnumError)


def test_make_short_enum():
    Color = make_short_enum("Color", {"Red": None, "Green": 5, "Blue": None}, repr="C", catch_all="Red")
    assert [m.value for m in Color] == [0, 5, 6]
    assert Color.__idl__.codec.repr == ReprChoice.UInt8
    assert Color(42) is Color.Red
    assert Color(6) is Color.Blue

    Level = make_short_enum("Level", {"Low": -200, "Mid": None, "High": 200}, repr="C", typename="app::Level")
    assert Level.__idl__.codec.repr == ReprChoice.Int16
    assert Level.__idl__.codec.typename == "app::Level"
    assert Level.Mid.value == -199


def test_make_short_enum_unknown_catch_all():
    with pytest.raises(TypeError):
        make_short_enum("Color", {"Red": None}, repr="C", catch_all="Purple")


def test_make_short_enum_errors():
    with pytest.raises(Empty):
        make_short_enum("Nothing", {}, repr="C")

    with pytest.raises(MissingRepresentation):
        make_short_enum("NoRepr", {"A": 1})


def test_auto_continues_after_negative():
    class Temperature(ShortEnum, repr="C"):
        Freezing = -2
        Cold = auto()
        Mild = auto()

    assert [m.value for m in Temperature] == [-2, -1, 0]
    assert Temperature.__idl__.codec.repr == ReprChoice.Int8


def test_member_less_base_shares_methods():
    class Described(ShortEnum):
        def describe(self):
            return f"{self.name}={self.encode()}"

    class Light(Described, repr="C"):
        Red = 1
        Green = 2

    assert "__idl__" not in Described.__dict__
    assert Light.Green.describe() == "Green=2"
    assert Light.__idl__.codec.repr == ReprChoice.UInt8

    with pytest.raises(Empty):
        derive_codec(Described, repr="C")


def test_out_of_range_value_is_not_caught():
    assert tc.Status(255) is tc.Status.Unknown
    with pytest.raises(InvalidDiscriminant, match="invalid value: 256"):
        tc.Status(256)
    with pytest.raises(InvalidDiscriminant):
        tc.Status(-1)


def test_failed_make_short_enum_closes_class_scope():
    with pytest.raises(DiscriminantOverflow) as e:
        make_short_enum("Big", {"A": (1 << 63) - 1, "B": None}, repr="C")
    assert e.value.location is None
    assert not str(e.value).startswith("B:")

    class After(ShortEnum, repr="C"):
        A = 1

    with pytest.raises(TypeError):
        other("A")

    with pytest.raises(ValueError):
        make_short_enum("Reserved", {"A": 1, "_reserved_": 2}, repr="C")

    with pytest.raises(TypeError):
        other("A")
