"""
nquery
======
Read-only query tool for the Nomad job API.

Lists jobs, narrows them with filters, fetches the full record for each match
and prints either the records or a flattened subset of their fields as JSON.

Usage:
    from nquery import FilterCriteria, JobRepository, NomadClient, QueryConfig
    from nquery import TriState, select_jobs

    config = QueryConfig.from_env()
    with NomadClient(config) as client:
        jobs = select_jobs(
            JobRepository(client),
            FilterCriteria(name_prefix="web", periodic=TriState.REQUIRE_FALSE),
        )

Environment Variables:
    NOMAD_ADDR: Base address of the Nomad API (default: http://127.0.0.1:4646)
    NQUERY_LOG_LEVEL: Log level for the command line tool (default: WARNING)
"""

from .client import NomadClient
from .config import QueryConfig
from .exceptions import (
    InternalConsistencyError,
    InvalidFieldPathError,
    NomadConnectionError,
    NomadDecodeError,
    NomadError,
    NomadHTTPError,
    NomadReadError,
)
from .filters import FilterCriteria, TriState, filter_summaries, select_jobs
from .models import FullJob, JobSummary, ParameterizedJobConfig, PeriodicConfig
from .output import render
from .projection import FieldSelector, project
from .repository import JobRepository

__version__ = "0.1.0"

__all__ = [
    "FieldSelector",
    "FilterCriteria",
    "FullJob",
    "InternalConsistencyError",
    "InvalidFieldPathError",
    "JobRepository",
    "JobSummary",
    "NomadClient",
    "NomadConnectionError",
    "NomadDecodeError",
    "NomadError",
    "NomadHTTPError",
    "NomadReadError",
    "ParameterizedJobConfig",
    "PeriodicConfig",
    "QueryConfig",
    "TriState",
    "filter_summaries",
    "project",
    "render",
    "select_jobs",
]
