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

from ._type_helper import Annotated, get_origin, get_args


int8 = Annotated[int, "int8"]
int16 = Annotated[int, "int16"]
int32 = Annotated[int, "int32"]
int64 = Annotated[int, "int64"]
uint8 = Annotated[int, "uint8"]
uint16 = Annotated[int, "uint16"]
uint32 = Annotated[int, "uint32"]
uint64 = Annotated[int, "uint64"]

# Declaring repr=repr_c asks for the narrowest integer that holds every discriminant
repr_c = "C"


_type_code_align_size_default_mapping = {
    int8: ('b', 1, 1, 0),
    int16: ('h', 2, 2, 0),
    int32: ('i', 4, 4, 0),
    int64: ('q', 8, 8, 0),
    uint8: ('B', 1, 1, 0),
    uint16: ('H', 2, 2, 0),
    uint32: ('I', 4, 4, 0),
    uint64: ('Q', 8, 8, 0),
}


def primitive_name(_type) -> str:
    """Name of a primitive integer tag, 'uint16' for types.uint16."""
    if get_origin(_type) == Annotated and len(get_args(_type)) == 2:
        return get_args(_type)[1]
    raise TypeError(f"{_type!r} is not a primitive integer type.")


__all__ = [
    "int8", "int16", "int32", "int64", "uint8", "uint16", "uint32", "uint64",
    "repr_c", "primitive_name"
]
