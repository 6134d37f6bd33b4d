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

from typing import Any, ClassVar, Dict, Mapping, Optional, Sequence, Tuple, TYPE_CHECKING
from collections import deque
from enum import EnumMeta

from ._support import Buffer, Endianness
from ._type_normalize import get_type_declaration
from ._builder import Builder


if TYPE_CHECKING:
    from ._codegen import GeneratedCodec
    from ._machinery import ShortEnumMachine


class IDLNamespaceScope:
    current = None
    stack = deque()

    @classmethod
    def enter(cls, scope):
        if cls.current is not None:
            cls.stack.append(cls.current)
        cls.current = scope

    @classmethod
    def exit(cls):
        if cls.stack:
            cls.current = cls.stack.pop()
        else:
            cls.current = None


class IDL:
    def __init__(self, datatype):
        self._populated: bool = False
        self.buffer: Buffer = Buffer()
        self.datatype: type = datatype
        self.codec: 'GeneratedCodec' = None
        self.machine: 'ShortEnumMachine' = None

    def populate(self):
        if not self._populated:
            declaration = get_type_declaration(self.datatype)
            self.codec = Builder.derive(declaration, members=self.datatype.__members__)
            self.machine = Builder.build_machine(self.codec)
            self._populated = True

    def serialize(self, object, buffer: Optional[Buffer] = None, endianness: Optional[Endianness] = None) -> bytes:
        if not self._populated:
            self.populate()

        ibuffer = buffer or self.buffer
        ibuffer.seek(0)
        ibuffer.zero_out()
        ibuffer.set_align_offset(0)
        ibuffer.set_endianness(endianness or Endianness.native())

        # Encapsulation header: plain CDR, the low bit of the second byte flags little endian
        ibuffer.write('b', 1, 0)
        ibuffer.write('b', 1, 1 if ibuffer.endianness == Endianness.Little else 0)
        ibuffer.write('b', 1, 0)
        ibuffer.write('b', 1, 0)
        ibuffer.set_align_offset(4)

        self.machine.serialize(ibuffer, object)
        return ibuffer.asbytes()

    def deserialize(self, data, has_header: bool = True, endianness: Optional[Endianness] = None) -> object:
        if not self._populated:
            self.populate()

        if has_header and endianness is not None:
            raise TypeError("The endianness is read from the header, do not pass one for data that carries a header.")

        buffer = Buffer(data, align_offset=4 if has_header else 0) if not isinstance(data, Buffer) else data

        if has_header and buffer.tell() == 0:
            buffer.read('b', 1)
            v = buffer.read('b', 1)
            buffer.set_endianness(Endianness.Little if (v & 1) > 0 else Endianness.Big)
            buffer.read('b', 1)
            buffer.read('b', 1)
        elif not has_header:
            buffer.set_endianness(endianness or Endianness.native())

        return self.machine.deserialize(buffer)


class ShortEnumMeta(EnumMeta):
    __idl__: ClassVar['IDL']
    __idl_typename__: ClassVar[str]
    __idl_annotations__: ClassVar[Dict[str, Any]]
    __idl_field_annotations__: ClassVar[Dict[str, Dict[str, Sequence[Any]]]]

    @classmethod
    def __prepare__(metacls, __name: str, __bases: Tuple[type, ...], **kwds: Any) -> Mapping[str, Any]:
        typename = kwds.pop("typename", None)
        repr_ = kwds.pop("repr", None)

        namespace: Dict[str, Any] = super().__prepare__(__name, __bases, **kwds)

        if typename:
            namespace["__idl_typename__"] = typename

        namespace["__idl_annotations__"] = {} if repr_ is None else {"repr": repr_}
        namespace["__idl_field_annotations__"] = {}
        IDLNamespaceScope.enter(namespace)

        return namespace

    def __new__(metacls, name, bases, namespace, **kwds):
        IDLNamespaceScope.exit()
        new_cls = super().__new__(metacls, name, bases, namespace)

        if "__idl_typename__" not in namespace:
            new_cls.__idl_typename__ = name

        # Member-less classes, ShortEnum itself included, are bases for the concrete enums
        if new_cls._member_names_:
            new_cls.__idl__ = IDL(new_cls)
            new_cls.__idl__.populate()

        return new_cls

    def __repr__(cls):
        # Note, this is the _class_ repr
        if cls.__name__ == "ShortEnum":
            return "ShortEnum"
        return f"{cls.__name__}(ShortEnum, idl_typename='{getattr(cls, '__idl_typename__', cls.__name__)}')"
