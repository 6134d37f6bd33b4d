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

import logging

from typing import Any, Mapping, Optional

from ._definition import TypeDeclaration
from ._validate import validate_declaration
from ._resolve import resolve_discriminants
from ._infer import infer_repr
from ._codegen import GeneratedCodec, generate_codec
from ._machinery import ShortEnumMachine


log = logging.getLogger(__name__)


class Builder:
    @classmethod
    def derive(cls, declaration: TypeDeclaration, members: Optional[Mapping[str, Any]] = None) -> GeneratedCodec:
        enum = validate_declaration(declaration)
        resolved = resolve_discriminants(enum)
        repr = infer_repr(enum.repr_mode, [v.discriminant for v in resolved], enum.location())

        if enum.repr_mode.is_platform:
            log.debug("%s: discriminants %s inferred as %s", enum.name,
                      [v.discriminant for v in resolved], repr.value)
        else:
            log.debug("%s: discriminants %s use declared %s", enum.name,
                      [v.discriminant for v in resolved], repr.value)

        return generate_codec(enum, resolved, repr, members)

    @classmethod
    def build_machine(cls, codec: GeneratedCodec) -> ShortEnumMachine:
        return ShortEnumMachine(codec)
