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

from typing import Any, Dict, Mapping, Optional, Sequence, Tuple

from ._definition import EnumDefinition, ResolvedVariant, ReprChoice
from .errors import MultipleCatchAll, InvalidDiscriminant


class GeneratedCodec:
    """The encode/decode pair derived for one enum.

    ``encode`` maps a variant to its discriminant, ``decode`` maps an integer
    back. Variants are whatever objects the codec was generated with, the
    enum members for a ShortEnum and the variant names otherwise.
    """

    def __init__(self, typename: str, repr: ReprChoice, variants: Tuple[ResolvedVariant, ...],
                 catch_all: Optional[ResolvedVariant], members: Mapping[str, Any]) -> None:
        self.typename: str = typename
        self.repr: ReprChoice = repr
        self.variants: Tuple[ResolvedVariant, ...] = variants
        self.expected: Tuple[int, ...] = tuple(v.discriminant for v in variants)
        self.has_catch_all: bool = catch_all is not None
        self.catch_all: Any = members[catch_all.name] if catch_all is not None else None

        self._encode: Dict[Any, int] = {}
        self._decode: Dict[int, Any] = {}
        for variant in variants:
            member = members[variant.name]
            self._encode.setdefault(member, variant.discriminant)
            self._decode.setdefault(variant.discriminant, member)

    def encode(self, variant: Any) -> int:
        try:
            return self._encode[variant]
        except (KeyError, TypeError):
            raise TypeError(f"{variant!r} is not a variant of {self.typename}.") from None

    def decode(self, value: int) -> Any:
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError(f"{value!r} is not an integer, cannot decode {self.typename}.")
        # Values the representation cannot carry never reach the catch-all
        if not self.repr.holds(value):
            raise InvalidDiscriminant(value, self.expected)
        if value in self._decode:
            return self._decode[value]
        if self.has_catch_all:
            return self.catch_all
        raise InvalidDiscriminant(value, self.expected)

    def __repr__(self) -> str:
        return f"GeneratedCodec({self.typename}, repr={self.repr.value}, expected={list(self.expected)})"


def generate_codec(enum: EnumDefinition, resolved: Sequence[ResolvedVariant], repr: ReprChoice,
                   members: Optional[Mapping[str, Any]] = None) -> GeneratedCodec:
    catch_alls = [v for v in resolved if v.is_catch_all]
    if len(catch_alls) > 1:
        raise MultipleCatchAll(
            "only one variant can be marked other, found " + ", ".join(v.name for v in catch_alls),
            enum.location()
        )

    if members is None:
        members = {v.name: v.name for v in resolved}

    return GeneratedCodec(
        typename=enum.name,
        repr=repr,
        variants=tuple(resolved),
        catch_all=catch_alls[0] if catch_alls else None,
        members=members
    )


__all__ = ["GeneratedCodec", "generate_codec"]
