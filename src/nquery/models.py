"""Job models for the Nomad API.

The listing endpoint and the per-job endpoint describe the same job with
different shapes: ``Periodic`` and ``ParameterizedJob`` are bare booleans in a
listing entry but structured records in a full job. They are kept as two
separate models joined only by the job ID.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class JobSummary(BaseModel):
    """One entry of the ``/v1/jobs`` listing."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    id: str = Field(alias="ID")
    parent_id: str = Field(default="", alias="ParentID")
    name: str = Field(default="", alias="Name")
    type: str = Field(default="", alias="Type")
    status: str = Field(default="", alias="Status")
    periodic: Optional[bool] = Field(default=None, alias="Periodic")
    parameterized_job: Optional[bool] = Field(default=None, alias="ParameterizedJob")


class PeriodicConfig(BaseModel):
    """Schedule of a periodic job."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    enabled: bool = Field(default=False, alias="Enabled")
    spec: str = Field(default="", alias="Spec")
    spec_type: str = Field(default="", alias="SpecType")
    prohibit_overlap: bool = Field(default=False, alias="ProhibitOverlap")


class ParameterizedJobConfig(BaseModel):
    """Dispatch requirements of a parameterized job."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    payload: str = Field(default="", alias="Payload")
    meta_required: Optional[List[str]] = Field(default=None, alias="MetaRequired")
    meta_optional: Optional[List[str]] = Field(default=None, alias="MetaOptional")


class FullJob(BaseModel):
    """A job as returned by ``/v1/job/{id}``.

    Only the fields nquery filters on are modeled. Every other key of the
    response is kept verbatim in ``extra`` so field paths can still reach it.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    id: str = Field(alias="ID")
    parent_id: str = Field(default="", alias="ParentID")
    name: str = Field(default="", alias="Name")
    type: str = Field(default="", alias="Type")
    status: str = Field(default="", alias="Status")
    periodic: Optional[PeriodicConfig] = Field(default=None, alias="Periodic")
    parameterized_job: Optional[ParameterizedJobConfig] = Field(
        default=None, alias="ParameterizedJob"
    )

    @property
    def extra(self) -> Dict[str, Any]:
        """Response keys that are not modeled fields."""
        return self.model_extra or {}

    def to_json(self) -> Dict[str, Any]:
        """Return a fresh plain-JSON copy of the job using the API's key names.

        Only keys present in the response are included; model defaults are
        never filled in.
        """
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)
