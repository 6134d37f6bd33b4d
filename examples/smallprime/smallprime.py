"""
 * Copyright(c) 2021 ZettaScale Technology and others
 *
 * This program and the accompanying materials are made available under the
 * terms of the Eclipse Public License v. 2.0 which is available at
 * http://www.eclipse.org/legal/epl-2.0, or the Eclipse Distribution License
 * v. 1.0 which is available at
 * http://www.eclipse.org/org/documents/edl-v10.php.
 *
 * SPDX-License-Identifier: EPL-2.0 OR BSD-3-Clause
"""

from enum import auto

from cdrshort import ShortEnum, Endianness, InvalidDiscriminant
from cdrshort.annotations import other


# Define an enum whose discriminants all fit in a byte
# In C this would be "enum SmallPrime { Two = 2, Three = 3, Five = 5, Seven = 7 };"
# repr="C" picks the narrowest integer that holds every value, here uint8
class SmallPrime(ShortEnum, repr="C"):
    Two = 2
    Three = 3
    Five = 5
    Seven = 7


# Unknown takes the value after Three, and any value that matches
# no variant decodes to it instead of failing
class Status(ShortEnum, repr="C"):
    Ready = 2
    Busy = 3
    Unknown = auto()
    other("Unknown")


# Serialize to CDR, a 4 byte header followed by a single byte
data = SmallPrime.Seven.serialize(endianness=Endianness.Big)
print(data.hex())

# And back again
print(SmallPrime.deserialize(data))

# Values without a variant are rejected with the list of accepted values
try:
    SmallPrime(4)
except InvalidDiscriminant as e:
    print(e)

# Unless the enum has a catch-all variant
print(Status(42))
