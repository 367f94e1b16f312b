"""Field projection.

Resolves JSONPath expressions against each job and builds one flat mapping
per job. A path without a match leaves its key out of that job's mapping.
"""

import logging
from typing import Any, Dict, Iterable, List

from jsonpath_ng import parse
from jsonpath_ng.exceptions import JsonPathLexerError, JsonPathParserError

from .exceptions import InvalidFieldPathError
from .models import FullJob

logger = logging.getLogger(__name__)


class FieldSelector:
    """Output key to compiled JSONPath expression.

    Field ``TaskGroups[0].Name`` becomes the path ``$.TaskGroups[0].Name``
    and is written under the key ``TaskGroups[0].Name``.
    """

    def __init__(self, paths: Dict[str, str]):
        self.paths = dict(paths)
        self._compiled = {}
        for key, path in self.paths.items():
            try:
                self._compiled[key] = parse(path)
            except (JsonPathLexerError, JsonPathParserError) as e:
                raise InvalidFieldPathError(key, str(e)) from e

    @classmethod
    def from_fields(cls, fields: Iterable[str]) -> "FieldSelector":
        """Build a selector rooted at the job document for each field."""
        return cls({field: f"$.{field}" for field in fields})

    def __len__(self) -> int:
        return len(self.paths)

    def __bool__(self) -> bool:
        return bool(self.paths)

    def resolve(self, document: Dict[str, Any]) -> Dict[str, Any]:
        """Flatten one JSON document; the last match of each path wins."""
        view: Dict[str, Any] = {}
        for key, expression in self._compiled.items():
            try:
                matches = expression.find(document)
            except (TypeError, KeyError) as e:
                # Indexing into a scalar or mapping; the path does not apply here
                logger.debug(f"No match for {key}: {e}")
                continue
            for match in matches:
                logger.debug(f"Match: {key}, {match.value!r}")
                view[key] = match.value
        return view


def project(selector: FieldSelector, jobs: Iterable[FullJob]) -> List[Dict[str, Any]]:
    """Build one flattened mapping per job, in input order.

    Each job is resolved against its own fresh JSON snapshot, so the source
    records are never modified.
    """
    return [selector.resolve(job.to_json()) for job in jobs]
