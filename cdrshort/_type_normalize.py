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

from dataclasses import is_dataclass, fields
from enum import Enum
from inspect import isclass
from typing import Any, Dict, Optional, Sequence, Tuple

from ._definition import TypeDeclaration, TypeKind, VariantDeclaration
from ._validate import CODEC_NAMESPACE, CATCH_ALL_MARKER


def _value_fields(value: Any) -> Tuple[str, ...]:
    # An integer is a bare discriminant, anything else is payload.
    if isinstance(value, int) and not isinstance(value, bool):
        return ()
    if is_dataclass(value):
        return tuple(f.name for f in fields(value))
    if isinstance(value, tuple):
        return tuple(str(i) for i in range(len(value)))
    return ("value",)


def _type_kind(cls: Any) -> TypeKind:
    if not isclass(cls):
        return TypeKind.Other
    if issubclass(cls, Enum):
        return TypeKind.Enum
    if is_dataclass(cls):
        return TypeKind.Struct
    return TypeKind.Other


def get_idl_annotations(cls: Any) -> Dict[str, Any]:
    return getattr(cls, "__idl_annotations__", {})


def get_idl_field_annotations(cls: Any) -> Dict[str, Dict[str, Sequence[Any]]]:
    return getattr(cls, "__idl_field_annotations__", {})


def get_type_declaration(cls: Any, repr: Any = None, catch_all: Optional[str] = None) -> TypeDeclaration:
    """Describe a Python class the way the derivation expects its input.

    ``repr`` and ``catch_all`` override or complement what the class declares
    itself, which makes plain ``enum.Enum`` classes usable as well.
    """
    kind = _type_kind(cls)
    name = getattr(cls, "__idl_typename__", None) or getattr(cls, "__name__", type(cls).__name__)
    field_annotations = get_idl_field_annotations(cls)

    variants = []
    if kind == TypeKind.Enum:
        # __members__ keeps aliases, so duplicate values stay visible
        for vname, member in cls.__members__.items():
            value = member._value_
            vfields = _value_fields(value)
            annotations = {ns: list(items) for ns, items in field_annotations.get(vname, {}).items()}
            if catch_all == vname:
                annotations.setdefault(CODEC_NAMESPACE, []).append(CATCH_ALL_MARKER)
            variants.append(VariantDeclaration(
                name=vname,
                discriminant=None if vfields else value,
                fields=vfields,
                annotations=annotations
            ))

        if catch_all is not None and catch_all not in cls.__members__:
            raise TypeError(f"{catch_all} is not a variant of {name}.")

    generics = tuple(getattr(cls, "__parameters__", ())) + tuple(getattr(cls, "__type_params__", ()))

    return TypeDeclaration(
        name=name,
        kind=kind,
        variants=tuple(variants),
        repr=repr if repr is not None else get_idl_annotations(cls).get("repr"),
        generics=generics
    )


__all__ = ["get_type_declaration", "get_idl_annotations", "get_idl_field_annotations"]
