# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: wired framework
"""Dotted-path access into nested mappings, sequences and objects."""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping, MutableSequence, Sequence
from typing import Any

_MISSING = object()


def _get_segment(target: Any, segment: str) -> Any:
    if isinstance(target, Mapping):
        return target.get(segment, _MISSING)
    if isinstance(target, Sequence) and not isinstance(target, str | bytes):
        try:
            return target[int(segment)]
        except (ValueError, IndexError):
            return _MISSING
    return getattr(target, segment, _MISSING)


def data_get(target: Any, path: str | None, default: Any = None) -> Any:
    """Read a value from ``target`` using a dotted ``path``.

    A ``None`` path returns ``target`` itself. Missing segments yield ``default``.
    """
    if path is None:
        return target

    current = target
    for segment in path.split("."):
        current = _get_segment(current, segment)
        if current is _MISSING:
            return default
    return current


def data_set(target: Any, path: str, value: Any) -> None:
    """Write ``value`` into ``target`` at a dotted ``path``.

    Intermediate mappings are created as needed.
    """
    head, _, rest = path.partition(".")

    if not rest:
        if isinstance(target, MutableMapping):
            target[head] = value
        elif isinstance(target, MutableSequence):
            target[int(head)] = value
        else:
            setattr(target, head, value)
        return

    child = _get_segment(target, head)
    if child is _MISSING or child is None:
        child = {}
        data_set(target, head, child)

    data_set(child, rest, value)
