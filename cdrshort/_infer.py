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

from typing import Optional, Sequence

from ._definition import ReprChoice, ReprMode
from .errors import MissingRepresentation, UnsupportedRange


# Candidate widths, narrowest first. 64 bit is never inferred.
UNSIGNED_FAMILY = (ReprChoice.UInt8, ReprChoice.UInt16, ReprChoice.UInt32)
SIGNED_FAMILY = (ReprChoice.Int8, ReprChoice.Int16, ReprChoice.Int32)


def infer_repr(mode: Optional[ReprMode], discriminants: Sequence[int], location: Optional[str] = None) -> ReprChoice:
    """Pick the integer type an enum is encoded as.

    A fixed representation is taken as is, after checking that every
    discriminant fits in it. The platform-compatible representation takes
    the unsigned family when no discriminant is negative and the signed
    family otherwise, then the first width of that family whose range
    covers all discriminants.
    """
    if mode is None:
        raise MissingRepresentation("missing repr declaration, use repr='C' or a fixed width integer", location)

    if not mode.is_platform:
        for value in discriminants:
            if not mode.fixed.holds(value):
                raise UnsupportedRange(f"discriminant {value} does not fit in {mode.fixed.value}", location)
        return mode.fixed

    low, high = min(discriminants), max(discriminants)
    family = UNSIGNED_FAMILY if low >= 0 else SIGNED_FAMILY

    for choice in family:
        if choice.min <= low and high <= choice.max:
            return choice

    raise UnsupportedRange(
        f"discriminants in [{low}, {high}] do not fit in {family[-1].value}, unsupported repr for short enum",
        location
    )


__all__ = ["infer_repr", "UNSIGNED_FAMILY", "SIGNED_FAMILY"]
