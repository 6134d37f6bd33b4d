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

from typing import Any

from ._main import IDLNamespaceScope
from ._validate import CODEC_NAMESPACE, CATCH_ALL_MARKER


def __variant_annotate(pvariant: str, namespace: str, value: Any) -> None:
    if not IDLNamespaceScope.current:
        raise TypeError("Cannot annotate variants while not in class scope")

    if pvariant not in IDLNamespaceScope.current:
        raise TypeError(f"Variant {pvariant} is not defined.")

    annotations = IDLNamespaceScope.current["__idl_field_annotations__"]
    annotations.setdefault(pvariant, {}).setdefault(namespace, []).append(value)


def other(apply_to: str) -> None:
    """Decode any unknown value as this variant instead of failing."""
    __variant_annotate(apply_to, CODEC_NAMESPACE, CATCH_ALL_MARKER)


def variant_meta(apply_to: str, *items: Any, namespace: str = CODEC_NAMESPACE) -> None:
    """Attach metadata the codec does not interpret itself, for tools built on top of it."""
    for item in items:
        __variant_annotate(apply_to, namespace, item)


__all__ = ["other", "variant_meta"]
