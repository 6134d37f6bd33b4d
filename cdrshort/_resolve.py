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

from typing import Dict, Optional, Tuple

from ._definition import EnumDefinition, ResolvedVariant
from .errors import DiscriminantOverflow, DuplicateDiscriminant


DISCRIMINANT_MIN = -9223372036854775808
DISCRIMINANT_MAX = 9223372036854775807


def next_discriminant(previous: Optional[int], location: Optional[str] = None) -> int:
    """Implicit discriminant following ``previous``, 0 for the first variant."""
    if previous is None:
        return 0
    if previous >= DISCRIMINANT_MAX:
        raise DiscriminantOverflow(f"implicit discriminant after {previous} overflows a 64 bit integer", location)
    return previous + 1


def resolve_discriminants(enum: EnumDefinition) -> Tuple[ResolvedVariant, ...]:
    resolved = []
    seen: Dict[int, str] = {}
    previous = None

    for variant in enum.variants:
        location = enum.location(variant.name)
        if variant.discriminant is None:
            value = next_discriminant(previous, location)
        else:
            value = variant.discriminant
            if not DISCRIMINANT_MIN <= value <= DISCRIMINANT_MAX:
                raise DiscriminantOverflow(f"discriminant {value} does not fit in a 64 bit integer", location)

        if value in seen:
            raise DuplicateDiscriminant(
                f"discriminant value {value} assigned more than once, also used by {seen[value]}", location
            )
        seen[value] = variant.name
        resolved.append(ResolvedVariant(variant, value))
        previous = value

    return tuple(resolved)


__all__ = ["next_discriminant", "resolve_discriminants", "DISCRIMINANT_MIN", "DISCRIMINANT_MAX"]
