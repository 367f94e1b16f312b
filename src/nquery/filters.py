"""Job filtering.

Criteria are matched against listing summaries first, so full records are
only fetched for jobs that survive every filter.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, List, Optional

from .exceptions import InternalConsistencyError, NomadError
from .models import FullJob, JobSummary
from .repository import JobRepository

logger = logging.getLogger(__name__)


class TriState(str, Enum):
    """Constraint on an optional boolean job attribute."""

    UNCONSTRAINED = "unconstrained"
    REQUIRE_TRUE = "require_true"
    REQUIRE_FALSE = "require_false"

    @classmethod
    def from_flags(cls, include: bool, exclude: bool) -> "TriState":
        """Build a constraint from an include flag and its exclude flag.

        Examples:
            TriState.from_flags(False, False) -> UNCONSTRAINED
            TriState.from_flags(True, False)  -> REQUIRE_TRUE
            TriState.from_flags(False, True)  -> REQUIRE_FALSE

        Raises:
            InternalConsistencyError: Both flags are set
        """
        if include and exclude:
            raise InternalConsistencyError(
                "include and exclude flags are mutually exclusive"
            )
        if include:
            return cls.REQUIRE_TRUE
        if exclude:
            return cls.REQUIRE_FALSE
        return cls.UNCONSTRAINED

    def allows(self, value: Optional[bool]) -> bool:
        """Check a job attribute against this constraint (missing is false)."""
        if self is TriState.UNCONSTRAINED:
            return True
        return bool(value) == (self is TriState.REQUIRE_TRUE)


@dataclass(frozen=True)
class FilterCriteria:
    """Conjunctive job filters. ``None``/``UNCONSTRAINED`` means no constraint.

    Attributes:
        name_prefix: Case-insensitive prefix the job ID must start with
        status: Case-insensitive job status, e.g. "running"
        job_type: Case-insensitive job type, e.g. "batch"
        periodic: Constraint on the job being periodic
        parameterized: Constraint on the job being parameterized
    """

    name_prefix: str = ""
    status: Optional[str] = None
    job_type: Optional[str] = None
    periodic: TriState = TriState.UNCONSTRAINED
    parameterized: TriState = TriState.UNCONSTRAINED

    def matches(self, job: JobSummary) -> bool:
        """Return True when the summary satisfies every constrained filter."""
        if not self.periodic.allows(job.periodic):
            return False
        if not self.parameterized.allows(job.parameterized_job):
            return False
        if not job.id.lower().startswith(self.name_prefix.lower()):
            return False
        if self.status is not None and job.status.lower() != self.status.lower():
            return False
        if self.job_type is not None and job.type.lower() != self.job_type.lower():
            return False
        return True


def filter_summaries(
    jobs: Iterable[JobSummary], criteria: FilterCriteria
) -> Iterator[JobSummary]:
    """Yield the summaries matching ``criteria``, preserving order."""
    return (job for job in jobs if criteria.matches(job))


def select_jobs(
    repository: JobRepository,
    criteria: FilterCriteria,
    skip_failed: bool = False,
) -> List[FullJob]:
    """Get the full records of all jobs matching the criteria.

    The name prefix is also sent to the server to narrow the listing. Full
    records are fetched one at a time in listing order.

    Args:
        repository: Source of job listings and records
        criteria: Filters every returned job must satisfy
        skip_failed: Skip jobs whose record cannot be fetched instead of
            aborting. Listing failures always abort.

    Returns:
        Full job records in listing order

    Raises:
        NomadError: Listing failed, or a record fetch failed and
            ``skip_failed`` is False
    """
    listing = repository.list_jobs(criteria.name_prefix)

    jobs: List[FullJob] = []
    for summary in filter_summaries(listing, criteria):
        try:
            job = repository.get_job(summary.id)
        except NomadError as e:
            if not skip_failed:
                raise
            logger.warning(f"Skipping job {summary.id}: {e}")
            continue

        logger.debug(f"Individual job: {job!r}")
        jobs.append(job)

    logger.info(f"Selected {len(jobs)} of {len(listing)} listed jobs")
    return jobs
