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

from typing import TYPE_CHECKING

from .types import _type_code_align_size_default_mapping
from ._support import Buffer

if TYPE_CHECKING:
    from ._codegen import GeneratedCodec


class Machine:
    """Given a type, serialize and deserialize"""
    def __init__(self, type):
        self.alignment = 1

    def serialize(self, buffer: Buffer, value) -> None:
        pass

    def deserialize(self, buffer: Buffer):
        pass


class PrimitiveMachine(Machine):
    def __init__(self, type):
        self.type = type
        self.code, self.alignment, self.size, self.default = _type_code_align_size_default_mapping[type]

    def serialize(self, buffer, value):
        buffer.align(self.alignment)
        buffer.write(self.code, self.size, value)

    def deserialize(self, buffer):
        buffer.align(self.alignment)
        return buffer.read(self.code, self.size)


class ShortEnumMachine(Machine):
    """Writes an enum as the integer its codec encodes it to."""
    def __init__(self, codec: 'GeneratedCodec'):
        self.codec = codec
        self.primitive = PrimitiveMachine(codec.repr.type)
        self.alignment = self.primitive.alignment
        self.size = self.primitive.size

    def serialize(self, buffer, value):
        self.primitive.serialize(buffer, self.codec.encode(value))

    def deserialize(self, buffer):
        return self.codec.decode(self.primitive.deserialize(buffer))
