"""Shared fixtures for nquery tests."""

import copy

import pytest

from nquery.exceptions import NomadHTTPError


EXAMPLE_JOB = {
    "Stop": False,
    "Region": "global",
    "Namespace": "default",
    "ID": "example",
    "ParentID": "",
    "Name": "example",
    "Type": "service",
    "Priority": 50,
    "Datacenters": ["dc1"],
    "TaskGroups": [
        {
            "Name": "cache",
            "Count": 1,
            "Tasks": [
                {
                    "Name": "redis",
                    "Driver": "docker",
                    "Config": {"image": "redis:3.2"},
                    "Resources": {"CPU": 500, "MemoryMB": 256},
                }
            ],
        }
    ],
    "Periodic": None,
    "ParameterizedJob": None,
    "Meta": None,
    "Status": "running",
    "StatusDescription": "",
    "Version": 0,
    "SubmitTime": 1604360707460244478,
    "CreateIndex": 403,
    "ModifyIndex": 410,
}

CLEANUP_JOB = {
    "ID": "cleanup",
    "ParentID": "",
    "Name": "cleanup",
    "Type": "batch",
    "Priority": 50,
    "Datacenters": ["dc1"],
    "TaskGroups": [{"Name": "sweep", "Count": 1}],
    "Periodic": {
        "Enabled": True,
        "Spec": "*/15 * * * *",
        "SpecType": "cron",
        "ProhibitOverlap": True,
        "TimeZone": "UTC",
    },
    "ParameterizedJob": None,
    "Meta": {"team": "infra"},
    "Status": "running",
}

DISPATCH_JOB = {
    "ID": "Dispatch-Report",
    "ParentID": "",
    "Name": "dispatch-report",
    "Type": "batch",
    "Priority": 50,
    "Datacenters": ["dc1", "dc2"],
    "TaskGroups": [{"Name": "render", "Count": 1}, {"Name": "upload", "Count": 2}],
    "Periodic": None,
    "ParameterizedJob": {
        "Payload": "required",
        "MetaRequired": ["report_id"],
        "MetaOptional": None,
    },
    "Meta": None,
    "Status": "dead",
}


def summary_of(job: dict, **overrides) -> dict:
    """Build a listing entry the way /v1/jobs reports a full job."""
    entry = {
        "ID": job["ID"],
        "ParentID": job["ParentID"],
        "Name": job["Name"],
        "Namespace": "default",
        "Datacenters": job["Datacenters"],
        "Type": job["Type"],
        "Priority": job["Priority"],
        "Periodic": job["Periodic"] is not None,
        "ParameterizedJob": job["ParameterizedJob"] is not None,
        "Stop": False,
        "Status": job["Status"],
        "StatusDescription": "",
        "JobSummary": {"JobID": job["ID"], "Namespace": "default", "Summary": {}},
        "CreateIndex": 403,
        "ModifyIndex": 410,
    }
    entry.update(overrides)
    return entry


class FakeNomadClient:
    """Stand-in for NomadClient that answers from a resource -> body map.

    A value that is an exception instance is raised instead of returned.
    Unknown resources answer with a 404.
    """

    def __init__(self, responses: dict):
        self.responses = responses
        self.paths = []

    def get(self, resource: str):
        self.paths.append(resource)
        if resource not in self.responses:
            raise NomadHTTPError(404, "job not found")
        response = self.responses[resource]
        if isinstance(response, Exception):
            raise response
        return copy.deepcopy(response)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        return None


def make_cluster(*jobs: dict, prefix: str = "") -> FakeNomadClient:
    """Build a fake cluster serving a listing and a record for each job."""
    responses = {f"jobs?prefix={prefix}": [summary_of(job) for job in jobs]}
    for job in jobs:
        responses[f"job/{job['ID']}"] = job
    return FakeNomadClient(responses)


@pytest.fixture
def example_job():
    return copy.deepcopy(EXAMPLE_JOB)


@pytest.fixture
def cleanup_job():
    return copy.deepcopy(CLEANUP_JOB)


@pytest.fixture
def dispatch_job():
    return copy.deepcopy(DISPATCH_JOB)


@pytest.fixture
def cluster():
    """Fake cluster with a plain, a periodic and a parameterized job."""
    return make_cluster(EXAMPLE_JOB, CLEANUP_JOB, DISPATCH_JOB)
