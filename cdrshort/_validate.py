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

from typing import Any, Mapping, Optional, Sequence

from . import types
from ._definition import TypeDeclaration, TypeKind, EnumDefinition, VariantDefinition, VariantAttrs, \
    ReprMode, ReprChoice
from .errors import NotAnEnum, HasFields, Empty, Generic, UnsupportedRepresentation


CODEC_NAMESPACE = "codec"
CATCH_ALL_MARKER = "other"


def scan_variant_attrs(annotations: Mapping[str, Sequence[Any]]) -> VariantAttrs:
    """Reduce the raw annotations of one variant to the flags the codec cares about.

    Only items in the ``codec`` namespace are looked at. Key/value pairs,
    groups and markers other than ``other`` belong to someone else and are
    skipped without complaint.
    """
    is_catch_all = False
    for item in annotations.get(CODEC_NAMESPACE, ()):
        if isinstance(item, str) and item == CATCH_ALL_MARKER:
            is_catch_all = True
    return VariantAttrs(is_catch_all=is_catch_all)


_repr_by_name = {choice.value: choice for choice in ReprChoice}


def parse_repr(declared: Any, location: Optional[str] = None) -> Optional[ReprMode]:
    if declared is None:
        return None
    if isinstance(declared, ReprMode):
        return declared
    if isinstance(declared, ReprChoice):
        return ReprMode(declared)
    if isinstance(declared, str):
        if declared == types.repr_c:
            return ReprMode.platform()
        if declared in _repr_by_name:
            return ReprMode(_repr_by_name[declared])
    else:
        try:
            name = types.primitive_name(declared)
        except TypeError:
            name = None
        if name in _repr_by_name:
            return ReprMode(_repr_by_name[name])

    raise UnsupportedRepresentation(f"unsupported repr {declared!r} for short enum", location)


def validate_declaration(declaration: TypeDeclaration) -> EnumDefinition:
    name = declaration.name

    if declaration.kind != TypeKind.Enum:
        raise NotAnEnum("input must be an enum", name)

    variants = []
    for variant in declaration.variants:
        if variant.fields:
            raise HasFields("must be a unit variant to use a short enum codec", f"{name}.{variant.name}")
        variants.append(VariantDefinition(
            name=variant.name,
            discriminant=variant.discriminant,
            attrs=scan_variant_attrs(variant.annotations)
        ))

    if not variants:
        raise Empty("there must be at least one variant", name)

    if declaration.generics or declaration.constraints:
        raise Generic("generic enum is not supported", name)

    return EnumDefinition(
        name=name,
        variants=tuple(variants),
        repr_mode=parse_repr(declaration.repr, name)
    )


__all__ = ["scan_variant_attrs", "parse_repr", "validate_declaration", "CODEC_NAMESPACE", "CATCH_ALL_MARKER"]
