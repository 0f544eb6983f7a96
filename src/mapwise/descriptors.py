"""Descriptors that derive keys and values from the items of a sequence."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Union

from mapwise import MapwiseException
from mapwise._typing import ComputeFunc, Item


class FieldName:
    """Extracts a named field from an item.

    Mappings are looked up by key, every other object by attribute. A missing
    field, or an absent (``None``) item, extracts as ``None``.

    Args:
        name: Name of the field to extract.
    """

    __slots__ = ("name",)

    def __init__(self, name: str) -> None:
        self.name = name

    def extract(self, item: Item, index: int) -> Any:
        if item is None:
            return None
        if isinstance(item, Mapping):
            return item.get(self.name)
        return getattr(item, self.name, None)

    def __eq__(self, other):
        return isinstance(other, FieldName) and self.name == other.name

    def __hash__(self):
        return hash((FieldName, self.name))

    def __repr__(self):
        class_name = self.__class__.__name__
        return f"<{class_name}: name={self.name!r}>"


class ComputeFn:
    """Computes a result by calling ``func(item, index)``.

    The item is passed exactly as admitted, so ``func`` may receive ``None``
    when absent items are not excluded.
    """

    __slots__ = ("func",)

    def __init__(self, func: ComputeFunc) -> None:
        self.func = func

    def extract(self, item: Item, index: int) -> Any:
        return self.func(item, index)

    def __eq__(self, other):
        return isinstance(other, ComputeFn) and self.func == other.func

    def __hash__(self):
        return hash((ComputeFn, self.func))

    def __repr__(self):
        class_name = self.__class__.__name__
        name = getattr(self.func, "__qualname__", repr(self.func))
        return f"<{class_name}: func={name}>"


class Identity:
    """Uses the item itself. Only valid as a value descriptor."""

    __slots__ = ()

    def extract(self, item: Item, index: int) -> Any:
        return item

    def __repr__(self):
        return f"<{self.__class__.__name__}>"


IDENTITY = Identity()

Descriptor = Union[FieldName, ComputeFn, Identity]


def make_descriptor(obj: Any, allow_identity: bool = False) -> Descriptor:
    """Converts a field name or callable into a descriptor.

    Args:
        obj: A field name, a callable taking ``(item, index)``, an existing
            descriptor or, when ``allow_identity`` is set, ``None``.
        allow_identity: Allows ``None`` to stand for the item itself.

    Returns:
        The descriptor variant matching ``obj``.

    Raises:
        InvalidDescriptorError: ``obj`` is not a usable descriptor.
    """
    if isinstance(obj, (FieldName, ComputeFn)):
        return obj
    if isinstance(obj, Identity) or obj is None:
        if allow_identity:
            return IDENTITY
        raise InvalidDescriptorError("a key descriptor is required")
    if callable(obj):
        return ComputeFn(obj)
    if isinstance(obj, str):
        if not obj:
            raise InvalidDescriptorError("field name must not be empty")
        return FieldName(obj)
    raise InvalidDescriptorError(
        f"expected a field name or a callable, got {type(obj).__name__}: {obj!r}"
    )


class InvalidDescriptorError(MapwiseException, TypeError):
    """Descriptor is neither a field name nor a callable."""
