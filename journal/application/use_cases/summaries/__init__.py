"""Use cases for generating and managing summaries."""

from .default_range import default_summary_range
from .delete_summary import delete_summary
from .generate_summary import generate_summary
from .get_summary import get_summary
from .list_summaries import list_summaries

__all__ = [
    "default_summary_range",
    "delete_summary",
    "generate_summary",
    "get_summary",
    "list_summaries",
]
