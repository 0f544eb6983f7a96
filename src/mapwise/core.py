"""Index and group sequences of records by a computed key."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Sequence

from mapwise._typing import Key, Value
from mapwise.arguments import ensure_sequence, resolve_arguments
from mapwise.collectors import Collector, GroupCollector, IndexCollector

logger = logging.getLogger(__name__)


def key_by(items: Sequence[Any], key: Any, *args: Any) -> Dict[Key, Value]:
    """Indexes items by the results of the specified key descriptor.

    Args:
        items: A sequence of items, possibly containing ``None``.
        key: Field name or ``func(item, index)`` that produces the key.
        args: Optionally a value descriptor (field name or
            ``func(item, index)``, ``None`` for the item itself) followed by
            options, or the options alone. Options are an ``Options``
            instance or a mapping such as ``{"exclude_nullish": True}``.

    Returns:
        A dictionary with one value per key. When several items share a key the
        last one wins, while the key keeps the position of its first
        occurrence.

    Raises:
        InvalidInputError: ``items`` is not a sequence.
        InvalidDescriptorError: A descriptor is neither a field name nor
            callable.
        InvalidOptionsError: The options are not valid.
        InvalidKeyError: A computed key is unhashable.
    """
    return _collect(IndexCollector(), items, key, args)


def group_by(items: Sequence[Any], key: Any, *args: Any) -> Dict[Key, List[Value]]:
    """Groups items by the results of the specified key descriptor.

    Accepts the same arguments as ``key_by``.

    Returns:
        A dictionary of lists. Each list holds the values of every admitted
        item with that key, in the original order of the items.
    """
    return _collect(GroupCollector(), items, key, args)


def _collect(collector: Collector, items: Any, key: Any, args: Any) -> Dict[Key, Any]:
    items = ensure_sequence(items)
    arguments = resolve_arguments(key, *args)
    policy = arguments.options.policy
    logger.debug(
        "Collecting %d items with %s: key=%r, value=%r, %r",
        len(items),
        type(collector).__name__,
        arguments.key,
        arguments.value,
        policy,
    )

    for index, item in enumerate(items):
        if not policy.admits_item(item):
            logger.debug("Skipping absent item at index %d", index)
            continue

        computed_key = arguments.key.extract(item, index)
        if not policy.admits_key(computed_key):
            logger.debug("Skipping item with absent key at index %d", index)
            continue

        computed_value = arguments.value.extract(item, index)
        collector.add(computed_key, computed_value, index)

    result = collector.result()
    logger.debug(
        "Collected %d of %d items into %d keys", collector.count, len(items), len(result)
    )
    return result
