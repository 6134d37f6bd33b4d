import pytest

from cdrshort import ShortEnum
from cdrshort.annotations import other, variant_meta


def test_annotations_need_class_scope():
    with pytest.raises(TypeError):
        other("A")

    with pytest.raises(TypeError):
        variant_meta("A", "skip")


def test_annotations_are_stored_per_variant():
    class Mode(ShortEnum, repr="C"):
        Off = 0
        On = 1
        Unknown = 2
        variant_meta("On", ("rename", "enabled"))
        variant_meta("Off", "deprecated", namespace="docs")
        other("Unknown")

    assert Mode.__idl_field_annotations__ == {
        "On": {"codec": [("rename", "enabled")]},
        "Off": {"docs": ["deprecated"]},
        "Unknown": {"codec": ["other"]},
    }
    assert Mode.__idl__.codec.catch_all is Mode.Unknown
    assert Mode(7) is Mode.Unknown
