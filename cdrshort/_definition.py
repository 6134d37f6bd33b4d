"""
 * Copyright(c) 2021 to 2022 ZettaScale Technology and others
 *
 * This program and the accompanying materials are made available under the
 * terms of the Eclipse Public License v. 2.0 which is available at
 * http://www.eclipse.org/legal/epl-2.0, or the Eclipse Distribution License
 * v. 1.0 which is available at
 * http://www.eclipse.org/org/documents/edl-v10.php.
 *
 * SPDX-License-Identifier: EPL-2.0 OR BSD-3-Clause
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Mapping, Optional, Sequence, Tuple

from . import types


class TypeKind(Enum):
    Enum = auto()
    Struct = auto()
    Union = auto()
    Other = auto()


class ReprChoice(Enum):
    UInt8 = "uint8"
    UInt16 = "uint16"
    UInt32 = "uint32"
    UInt64 = "uint64"
    Int8 = "int8"
    Int16 = "int16"
    Int32 = "int32"
    Int64 = "int64"

    @property
    def signed(self) -> bool:
        return not self.value.startswith("u")

    @property
    def bits(self) -> int:
        return int(self.value.lstrip("uint"))

    @property
    def min(self) -> int:
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max(self) -> int:
        return (1 << (self.bits - 1)) - 1 if self.signed else (1 << self.bits) - 1

    @property
    def type(self) -> Any:
        return getattr(types, self.value)

    def holds(self, value: int) -> bool:
        return self.min <= value <= self.max


@dataclass(frozen=True)
class ReprMode:
    """Requested representation: a fixed width, or platform-compatible when ``fixed`` is None."""
    fixed: Optional[ReprChoice] = None

    @classmethod
    def platform(cls) -> 'ReprMode':
        return cls()

    @property
    def is_platform(self) -> bool:
        return self.fixed is None

    def __str__(self) -> str:
        return types.repr_c if self.fixed is None else self.fixed.value


@dataclass(frozen=True)
class VariantDeclaration:
    name: str
    discriminant: Optional[int] = None
    fields: Tuple[str, ...] = ()
    annotations: Mapping[str, Sequence[Any]] = field(default_factory=dict)


@dataclass(frozen=True)
class TypeDeclaration:
    name: str
    kind: TypeKind
    variants: Tuple[VariantDeclaration, ...] = ()
    repr: Any = None
    generics: Tuple[Any, ...] = ()
    constraints: Tuple[Any, ...] = ()


@dataclass(frozen=True)
class VariantAttrs:
    is_catch_all: bool = False


@dataclass(frozen=True)
class VariantDefinition:
    name: str
    discriminant: Optional[int] = None
    attrs: VariantAttrs = field(default_factory=VariantAttrs)


@dataclass(frozen=True)
class EnumDefinition:
    name: str
    variants: Tuple[VariantDefinition, ...]
    repr_mode: Optional[ReprMode] = None

    def location(self, variant: Optional[str] = None) -> str:
        return f"{self.name}.{variant}" if variant else self.name


@dataclass(frozen=True)
class ResolvedVariant:
    variant: VariantDefinition
    discriminant: int

    @property
    def name(self) -> str:
        return self.variant.name

    @property
    def is_catch_all(self) -> bool:
        return self.variant.attrs.is_catch_all
