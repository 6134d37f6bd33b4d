from enum import auto

from cdrshort import ShortEnum
from cdrshort.annotations import other, variant_meta
import cdrshort.types as tp


class SmallPrime(ShortEnum, repr=tp.repr_c):
    Two = 2
    Three = 3
    Five = 5
    Seven = 7


class SmallPrimeU8(ShortEnum, repr=tp.uint8):
    Two = 2
    Three = 3
    Five = 5
    Seven = 7


class SmallPrimeU16(ShortEnum, repr=tp.uint16):
    Two = 2
    Three = 3
    Five = 5
    Seven = 7


class Gaps(ShortEnum, repr="C"):
    A = auto()
    B = 5
    C = auto()


class Signed(ShortEnum, repr="C"):
    Minus = -1
    Zero = 0
    Five = 5


class Wide(ShortEnum, repr="C"):
    Low = 0
    High = 300


class Status(ShortEnum, repr="C"):
    Two = 2
    Three = 3
    Unknown = auto()
    other("Unknown")


class Pair(ShortEnum, repr="C"):
    Two = 2
    Three = 3


class Single(ShortEnum, repr="int32"):
    Only = -7


class Tagged(ShortEnum, repr="C", typename="wire::Tagged"):
    A = 1
    B = 2
    variant_meta("A", ("rename", "alpha"), ["group", 1], "skip")
    variant_meta("B", "other", namespace="docs")
