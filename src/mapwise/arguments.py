"""Resolution of the variable call shapes accepted by ``key_by`` and ``group_by``."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, NamedTuple

from mapwise import MapwiseException
from mapwise.descriptors import Descriptor, make_descriptor
from mapwise.options import Options, is_options_like, make_options


class ResolvedArguments(NamedTuple):
    key: Descriptor
    value: Descriptor
    options: Options


def ensure_sequence(items: Any) -> Sequence:
    """Ensures that the input is an ordered, indexable and finite sequence.

    Strings and bytes are sequences of characters rather than records and are
    rejected along with mappings, sets, iterators and scalars.

    Raises:
        InvalidInputError: ``items`` is not a sequence of records.
    """
    if isinstance(items, (str, bytes, bytearray)) or not isinstance(items, Sequence):
        raise InvalidInputError(
            f"expected a sequence of items, got {type(items).__name__}"
        )
    return items


def resolve_arguments(key: Any, *rest: Any) -> ResolvedArguments:
    """Resolves ``(key[, value][, options])`` into descriptors and options.

    The accepted shapes are ``(key)``, ``(key, options)``, ``(key, value)`` and
    ``(key, value, options)``. With two trailing arguments the first is always
    the value descriptor. With one, callables and field names are value
    descriptors while mappings and ``Options`` are options.

    Raises:
        InvalidDescriptorError: The key or value is not a valid descriptor.
        InvalidOptionsError: The options are not valid.
    """
    if len(rest) > 2:
        raise TypeError(f"expected at most 4 arguments, got {len(rest) + 2}")

    value: Any = None
    options: Any = None
    if len(rest) == 2:
        value, options = rest
    elif len(rest) == 1:
        (third,) = rest
        if callable(third) or isinstance(third, str):
            value = third
        elif is_options_like(third):
            options = third
        else:
            value = third  # None means identity, anything else is rejected

    return ResolvedArguments(
        key=make_descriptor(key),
        value=make_descriptor(value, allow_identity=True),
        options=make_options(options),
    )


class InvalidInputError(MapwiseException, TypeError):
    """Input is not an ordered sequence of items."""
