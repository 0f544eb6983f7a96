"""Options recognized by ``key_by`` and ``group_by`` and the nullish policy."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Optional

import pydantic
from pydantic import BaseModel, ConfigDict, StrictBool

from mapwise import MapwiseException
from mapwise._typing import Item, Key, OptionsLike


class Options(BaseModel):
    """Configuration of a single ``key_by`` or ``group_by`` call."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    exclude_nullish: StrictBool = False

    @property
    def policy(self) -> NullishPolicy:
        return NullishPolicy(self.exclude_nullish)


DEFAULT_OPTIONS = Options()


class NullishPolicy:
    """Decides which items and keys are admitted into the result.

    Absent items and absent keys are only dropped when ``exclude_nullish`` is
    set. Values are never gated.

    Args:
        exclude_nullish: Drop ``None`` items and items whose key is ``None``.
    """

    __slots__ = ("exclude_nullish",)

    def __init__(self, exclude_nullish: bool = False) -> None:
        self.exclude_nullish = exclude_nullish

    def admits_item(self, item: Item) -> bool:
        return not (self.exclude_nullish and item is None)

    def admits_key(self, key: Key) -> bool:
        return not (self.exclude_nullish and key is None)

    def __repr__(self):
        class_name = self.__class__.__name__
        return f"<{class_name}: exclude_nullish={self.exclude_nullish!r}>"


def is_options_like(obj: Any) -> bool:
    """Returns True if ``obj`` has the shape of an options object."""
    return isinstance(obj, (Options, Mapping)) and not callable(obj)


def make_options(value: Optional[OptionsLike] = None) -> Options:
    """Validates an options object.

    Args:
        value: ``None`` for the defaults, an ``Options`` instance or a mapping
            of option names to values.

    Raises:
        InvalidOptionsError: The value is not options-shaped, names an unknown
            option or has a value of the wrong type.
    """
    if value is None:
        return DEFAULT_OPTIONS
    if isinstance(value, Options):
        return value
    if not is_options_like(value):
        raise InvalidOptionsError(
            f"expected a mapping of options, got {type(value).__name__}: {value!r}"
        )
    try:
        return Options.model_validate(dict(value))
    except pydantic.ValidationError as exception:
        raise InvalidOptionsError(exception) from exception


class InvalidOptionsError(MapwiseException, ValueError):
    """Invalid or unknown options."""
