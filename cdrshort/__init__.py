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
from typing import Any, Dict, Optional, Type, TypeVar
from dataclasses import replace
from enum import Enum, auto

from ._main import ShortEnumMeta, IDLNamespaceScope
from ._support import Buffer, Endianness
from ._builder import Builder
from ._codegen import GeneratedCodec
from ._definition import TypeDeclaration, TypeKind, VariantDeclaration, ReprChoice
from ._resolve import next_discriminant
from ._type_normalize import get_type_declaration
from ._validate import CODEC_NAMESPACE, CATCH_ALL_MARKER
from .errors import InvalidDiscriminant
from .annotations import other


_TSE = TypeVar('_TSE', bound='ShortEnum')


class ShortEnum(Enum, metaclass=ShortEnumMeta):
    def _generate_next_value_(name, start, count, last_values):
        return next_discriminant(last_values[-1] if last_values else None)

    @classmethod
    def _missing_(cls, value):
        idl = cls.__dict__.get("__idl__")
        if idl is None or not isinstance(value, int) or isinstance(value, bool):
            return None
        return idl.codec.decode(value)

    def encode(self) -> int:
        return self.__class__.__idl__.codec.encode(self)

    def serialize(self, buffer: Optional[Buffer] = None, endianness: Optional[Endianness] = None) -> bytes:
        return self.__class__.__idl__.serialize(self, buffer=buffer, endianness=endianness)

    @classmethod
    def deserialize(cls: Type[_TSE], data: bytes, has_header: bool = True,
                    endianness: Optional[Endianness] = None) -> _TSE:
        return cls.__idl__.deserialize(data, has_header=has_header, endianness=endianness)


def make_short_enum(class_name: str, fields: Dict[str, Optional[int]], *, repr: Any = None,
                    typename: Optional[str] = None, catch_all: Optional[str] = None) -> Type[ShortEnum]:
    """Create a ShortEnum at runtime, a ``None`` value continues counting from the previous variant."""
    if catch_all is not None and catch_all not in fields:
        raise TypeError(f"Variant {catch_all} is not defined.")

    namespace = ShortEnumMeta.__prepare__(class_name, (ShortEnum,), typename=typename, repr=repr)

    try:
        for fieldname, value in fields.items():
            namespace[fieldname] = auto() if value is None else value

        if catch_all is not None:
            other(catch_all)
    except BaseException:
        IDLNamespaceScope.exit()
        raise

    cls = ShortEnumMeta(class_name, (ShortEnum,), namespace)
    if "__idl__" not in cls.__dict__:
        # Without variants nothing was derived, let the derivation report it
        derive_codec(cls)
    return cls


def _apply_overrides(declaration: TypeDeclaration, repr: Any, catch_all: Optional[str]) -> TypeDeclaration:
    if catch_all is not None:
        if catch_all not in (v.name for v in declaration.variants):
            raise TypeError(f"{catch_all} is not a variant of {declaration.name}.")

        variants = []
        for variant in declaration.variants:
            if variant.name == catch_all:
                annotations = {ns: list(items) for ns, items in variant.annotations.items()}
                annotations.setdefault(CODEC_NAMESPACE, []).append(CATCH_ALL_MARKER)
                variant = replace(variant, annotations=annotations)
            variants.append(variant)
        declaration = replace(declaration, variants=tuple(variants))

    if repr is not None:
        declaration = replace(declaration, repr=repr)

    return declaration


def derive_codec(datatype: Any, *, repr: Any = None, catch_all: Optional[str] = None) -> GeneratedCodec:
    """Derive the encode/decode pair for a declaration or for any enum class.

    Plain ``enum.Enum`` classes work too, pass ``repr`` (and optionally
    ``catch_all``) since they cannot declare those themselves. On a
    declaration both override or complement what it carries.
    """
    if isinstance(datatype, TypeDeclaration):
        return Builder.derive(_apply_overrides(datatype, repr, catch_all))

    declaration = get_type_declaration(datatype, repr=repr, catch_all=catch_all)
    members = datatype.__members__ if declaration.kind == TypeKind.Enum else None
    return Builder.derive(declaration, members)


__all__ = [
    "ShortEnum", "make_short_enum", "derive_codec", "GeneratedCodec", "TypeDeclaration", "TypeKind",
    "VariantDeclaration", "ReprChoice", "Buffer", "Endianness", "InvalidDiscriminant"
]
