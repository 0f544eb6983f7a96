"""Index and group ordered sequences of records into ordered dictionaries."""


class MapwiseException(Exception):
    """Base exception for all mapwise errors."""


from mapwise.core import group_by, key_by  # noqa: E402
from mapwise.options import Options  # noqa: E402

__all__ = ["MapwiseException", "Options", "group_by", "key_by"]
