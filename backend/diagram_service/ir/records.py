from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from .errors import IncompleteRecordError


NONE_MIDDLEWARE = "NONE"


class FlowRole(Enum):
    """Role of the counterpart system in one integration flow"""
    CONSUMER = "CONSUMER"
    PRODUCER = "PRODUCER"
    INVALID = "INVALID"

    @classmethod
    def parse(cls, raw: Optional[str]) -> "FlowRole":
        if raw == cls.CONSUMER.value:
            return cls.CONSUMER
        if raw == cls.PRODUCER.value:
            return cls.PRODUCER
        return cls.INVALID


class CatalogModel(BaseModel):
    # Catalog payloads are camelCase; unknown fields are dropped.
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


# ---- Review metadata ----

class Concern(CatalogModel):
    id: Optional[str] = None
    type: Optional[str] = None
    description: Optional[str] = None
    impact: Optional[str] = None
    disposition: Optional[str] = None
    status: Optional[str] = None
    severity: Optional[str] = None
    raised_by: Optional[str] = None
    raised_date: Optional[str] = None
    resolved_by: Optional[str] = None
    resolved_date: Optional[str] = None
    comments: Optional[str] = None
    follow_up_date: Optional[str] = None


class SolutionDetails(CatalogModel):
    solution_name: Optional[str] = None
    project_name: Optional[str] = None
    solution_review_code: Optional[str] = None
    solution_architect_name: Optional[str] = None
    delivery_project_manager_name: Optional[str] = None
    it_business_partner: Optional[str] = None


class SolutionOverview(CatalogModel):
    id: Optional[str] = None
    solution_details: Optional[SolutionDetails] = None
    reviewed_by: Optional[str] = None
    review_type: Optional[str] = None
    approval_status: Optional[str] = None
    review_status: Optional[str] = None
    conditions: Optional[str] = None
    business_unit: Optional[str] = None
    business_driver: Optional[str] = None
    value_outcome: Optional[str] = None
    application_users: List[str] = Field(default_factory=list)
    concerns: List[Concern] = Field(default_factory=list)

    @field_validator("application_users", "concerns", mode="before")
    @classmethod
    def _none_as_empty(cls, value):
        return [] if value is None else value


# ---- Integration flows ----

class IntegrationFlow(CatalogModel):
    id: Optional[str] = None
    component_name: Optional[str] = None
    counterpart_code: str = Field(alias="counterpartSystemCode")
    counterpart_role: Optional[str] = Field(default=None, alias="counterpartSystemRole")
    pattern: Optional[str] = Field(default=None, alias="integrationMethod")
    frequency: Optional[str] = None
    purpose: Optional[str] = None
    middleware: Optional[str] = None

    @property
    def role(self) -> FlowRole:
        return FlowRole.parse(self.counterpart_role)

    @property
    def middleware_name(self) -> Optional[str]:
        """Middleware the flow is routed through, or None for a direct flow."""
        if self.middleware is None:
            return None
        name = self.middleware.strip()
        if not name or name.upper() == NONE_MIDDLEWARE:
            return None
        return name


# ---- Root record ----

class SystemRecord(CatalogModel):
    code: str = Field(alias="systemCode")
    review_metadata: Optional[SolutionOverview] = Field(default=None, alias="solutionOverview")
    integration_flows: List[IntegrationFlow] = Field(default_factory=list)

    @field_validator("integration_flows", mode="before")
    @classmethod
    def _flows_default(cls, value):
        return [] if value is None else value

    def solution_details(self) -> SolutionDetails:
        if self.review_metadata is None:
            raise IncompleteRecordError(self.code, "solutionOverview")
        if self.review_metadata.solution_details is None:
            raise IncompleteRecordError(self.code, "solutionOverview.solutionDetails")
        return self.review_metadata.solution_details

    @property
    def solution_name(self) -> str:
        name = self.solution_details().solution_name
        if name is None:
            raise IncompleteRecordError(self.code, "solutionDetails.solutionName")
        return name

    @property
    def review_code(self) -> Optional[str]:
        return self.solution_details().solution_review_code


def index_records(records: List[SystemRecord]) -> dict:
    """Map system code -> record, keeping the first record for a repeated code."""
    index = {}
    for record in records:
        index.setdefault(record.code, record)
    return index
