"""Job lookups against the Nomad API."""

import logging
from typing import List
from urllib.parse import quote

from pydantic import TypeAdapter, ValidationError

from .client import NomadClient
from .exceptions import NomadDecodeError
from .models import FullJob, JobSummary

logger = logging.getLogger(__name__)

_SUMMARY_LIST = TypeAdapter(List[JobSummary])


class JobRepository:
    """Reads job listings and job records through a ``NomadClient``.

    Nothing is cached; every call is a network round trip.
    """

    def __init__(self, client: NomadClient):
        self.client = client

    def list_jobs(self, prefix: str = "") -> List[JobSummary]:
        """Get all jobs in the cluster whose ID starts with ``prefix``.

        The prefix is percent-encoded as a single query value so the server
        narrows the listing before any client-side filtering.

        Args:
            prefix: A string prefix which all the returned jobs must match

        Returns:
            Job summaries in listing order
        """
        path = f"jobs?prefix={quote(prefix, safe='')}"
        data = self.client.get(path)

        try:
            jobs = _SUMMARY_LIST.validate_python(data)
        except ValidationError as e:
            logger.debug(f"Unexpected job listing shape: {e}")
            raise NomadDecodeError() from e

        logger.debug(f"Listed {len(jobs)} jobs for prefix '{prefix}'")
        return jobs

    def get_job(self, job_id: str) -> FullJob:
        """Get a job by its ID.

        Args:
            job_id: The ID of the job to retrieve

        Returns:
            The full job record
        """
        data = self.client.get(f"job/{job_id}")

        try:
            job = FullJob.model_validate(data)
        except ValidationError as e:
            logger.debug(f"Unexpected shape for job {job_id}: {e}")
            raise NomadDecodeError() from e

        if job.id != job_id:
            logger.debug(f"Requested job {job_id} but received {job.id}")
            raise NomadDecodeError()
        return job
