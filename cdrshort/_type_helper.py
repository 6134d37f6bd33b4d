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

import sys


if sys.version_info < (3, 9):
    # Annotated and include_extras only landed in typing with 3.9
    from typing_extensions import Annotated, get_origin, get_args  # noqa F401
else:
    from typing import Annotated, get_origin, get_args  # noqa F401


__all__ = ["Annotated", "get_origin", "get_args"]
