"""Contains common type hints for mapwise."""

from typing import TYPE_CHECKING, Any, Callable, Hashable, Mapping, Optional, Union

if TYPE_CHECKING:
    from mapwise.options import Options

Item = Optional[Any]
Key = Optional[Hashable]
Value = Any
ComputeFunc = Callable[[Item, int], Any]
OptionsLike = Union["Options", Mapping[str, Any]]
