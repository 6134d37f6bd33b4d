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

from typing import Optional, Sequence, Tuple


class ShortEnumError(TypeError):
    """Raised while deriving the codec of an enum that cannot be supported.
    Print the exception directly or convert it to string for a detailed description.

    Attributes
    ----------
    msg: str
        A human readable description of the problem.
    location: str, optional
        The type (``"Prime"``) or variant (``"Prime.Seven"``) the problem was found on.
    """

    def __init__(self, msg: str, location: Optional[str] = None) -> None:
        self.msg = msg
        self.location = location
        super().__init__(f"{location}: {msg}" if location else msg)


class NotAnEnum(ShortEnumError):
    pass


class HasFields(ShortEnumError):
    pass


class Generic(ShortEnumError):
    pass


class Empty(ShortEnumError):
    pass


class MissingRepresentation(ShortEnumError):
    pass


class UnsupportedRepresentation(ShortEnumError):
    pass


class UnsupportedRange(ShortEnumError):
    pass


class MultipleCatchAll(ShortEnumError):
    pass


class DuplicateDiscriminant(ShortEnumError):
    pass


class DiscriminantOverflow(ShortEnumError):
    pass


def expected_message(value: int, expected: Sequence[int]) -> str:
    if len(expected) == 1:
        return f"invalid value: {value}, expected {expected[0]}"
    elif len(expected) == 2:
        return f"invalid value: {value}, expected {expected[0]} or {expected[1]}"
    return f"invalid value: {value}, expected one of: " + ", ".join(str(e) for e in expected)


class InvalidDiscriminant(ValueError):
    """Raised by decode when a value matches no variant and the enum has no catch-all.

    Attributes
    ----------
    value: int
        The offending value.
    expected: Tuple[int, ...]
        Every accepted discriminant, in declaration order.
    """

    def __init__(self, value: int, expected: Sequence[int]) -> None:
        self.value: int = value
        self.expected: Tuple[int, ...] = tuple(expected)
        super().__init__(expected_message(value, self.expected))


__all__ = [
    "ShortEnumError", "NotAnEnum", "HasFields", "Generic", "Empty", "MissingRepresentation",
    "UnsupportedRepresentation", "UnsupportedRange", "MultipleCatchAll", "DuplicateDiscriminant",
    "DiscriminantOverflow", "InvalidDiscriminant", "expected_message"
]
