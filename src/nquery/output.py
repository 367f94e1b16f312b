"""JSON rendering of query results."""

import json
from typing import Any, Sequence

from .models import FullJob


def render(data: Sequence[Any], pretty: bool = False) -> str:
    """Serialize full jobs or flattened mappings as one JSON document.

    Args:
        data: ``FullJob`` records or flattened per-job mappings
        pretty: Indent the output instead of printing a single line
    """
    items = [item.to_json() if isinstance(item, FullJob) else item for item in data]
    if pretty:
        return json.dumps(items, indent=2, ensure_ascii=False)
    return json.dumps(items, separators=(",", ":"), ensure_ascii=False)
