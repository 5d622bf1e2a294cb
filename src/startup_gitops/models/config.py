"""Configuration schema for a GitOps deployment."""

import re
from enum import Enum
from typing import Any, Dict, FrozenSet, List, Optional, Tuple

import email_validator
from email_validator import EmailNotValidError, validate_email
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictInt,
    StrictStr,
    field_serializer,
    field_validator,
    model_validator,
)
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

PROJECT_NAME_PATTERN = re.compile(r"^[a-z0-9-]+$")
DOMAIN_PATTERN = re.compile(r"^[a-z0-9.-]+$")

NODE_BOUNDS_ERROR_TYPE = "node_bounds"
NODE_BOUNDS_MESSAGE = "minNodes must be <= nodeCount <= maxNodes"

# Private DNS suffixes that self-hosted platforms use for contact addresses
PRIVATE_MAIL_DOMAINS = ("local", "test")

for _suffix in PRIVATE_MAIL_DOMAINS:
    if _suffix in email_validator.SPECIAL_USE_DOMAIN_NAMES:
        email_validator.SPECIAL_USE_DOMAIN_NAMES.remove(_suffix)


class EnvironmentName(str, Enum):
    """Deployable environments."""

    STAGING = "staging"
    PRODUCTION = "production"


class Application(str, Enum):
    """Applications that can be deployed onto the platform."""

    KEYCLOAK = "keycloak"
    MATTERMOST = "mattermost"
    NEXTCLOUD = "nextcloud"
    MAILU = "mailu"


class GitOpsModel(BaseModel):
    """
    Base for all configuration models.

    Documents use camelCase keys, attributes are snake_case. Validated
    values are frozen.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def to_document(self) -> Dict[str, Any]:
        """Convert to a JSON-compatible dict using the document's key names."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


def _check_domain(v: str) -> str:
    if not DOMAIN_PATTERN.match(v):
        raise ValueError("Invalid domain format")
    return v


def _check_environments(v: Optional[Tuple["Environment", ...]]) -> Optional[Tuple["Environment", ...]]:
    if v is not None and len(v) == 0:
        raise ValueError("At least one environment is required")
    return v


def node_bounds_hold(
    node_count: int, min_nodes: Optional[int] = None, max_nodes: Optional[int] = None
) -> bool:
    """Check that min_nodes <= node_count <= max_nodes for whichever bounds are set."""
    if min_nodes is not None and min_nodes > node_count:
        return False
    if max_nodes is not None and max_nodes < node_count:
        return False
    if min_nodes is not None and max_nodes is not None and min_nodes > max_nodes:
        return False
    return True


class Project(GitOpsModel):
    """Project metadata."""

    name: StrictStr = Field(..., min_length=1, max_length=50)
    domain: StrictStr = Field(..., min_length=1)
    email: StrictStr
    description: Optional[StrictStr] = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not PROJECT_NAME_PATTERN.match(v):
            raise ValueError(
                "Project name must contain only lowercase letters, numbers, and hyphens"
            )
        return v

    @field_validator("domain")
    @classmethod
    def validate_domain(cls, v: str) -> str:
        return _check_domain(v)

    @field_validator("email")
    @classmethod
    def validate_contact_email(cls, v: str) -> str:
        try:
            validate_email(v, check_deliverability=False, globally_deliverable=False)
        except EmailNotValidError:
            raise ValueError("Valid email address is required")
        return v


class Cluster(GitOpsModel):
    """Kubernetes cluster sizing for one environment."""

    region: StrictStr = Field(..., min_length=1)
    node_size: StrictStr = Field(..., min_length=1, description="Droplet size slug, e.g. s-2vcpu-4gb")
    node_count: StrictInt = Field(..., ge=1)
    min_nodes: Optional[StrictInt] = Field(None, ge=1, description="Autoscaler lower bound")
    max_nodes: Optional[StrictInt] = Field(None, le=100, description="Autoscaler upper bound")
    ha_control_plane: StrictBool = False
    version: Optional[StrictStr] = None  # Provider default if None


class Environment(GitOpsModel):
    """A deployment environment and the cluster backing it."""

    name: EnvironmentName
    cluster: Cluster
    domain: StrictStr

    @field_validator("domain")
    @classmethod
    def validate_domain(cls, v: str) -> str:
        return _check_domain(v)

    @model_validator(mode="after")
    def validate_node_bounds(self) -> "Environment":
        """Only runs once every field above has validated."""
        cluster = self.cluster
        if not node_bounds_hold(cluster.node_count, cluster.min_nodes, cluster.max_nodes):
            raise PydanticCustomError(NODE_BOUNDS_ERROR_TYPE, NODE_BOUNDS_MESSAGE)
        return self


class Features(GitOpsModel):
    """Optional platform features. Some of them require extra credentials."""

    email: StrictBool = False
    monitoring: StrictBool = True
    backup: StrictBool = True
    ssl: StrictBool = True

    def enabled(self) -> List[str]:
        """Names of the enabled features, in declaration order."""
        return [name for name in type(self).model_fields if getattr(self, name)]


class Config(GitOpsModel):
    """Top-level configuration of a GitOps deployment."""

    project: Project
    environments: Tuple[Environment, ...]
    features: Features = Field(default_factory=Features)
    applications: FrozenSet[Application] = Field(default_factory=frozenset)

    @field_validator("environments")
    @classmethod
    def validate_environments(cls, v: Tuple[Environment, ...]) -> Tuple[Environment, ...]:
        return _check_environments(v)

    @field_serializer("applications")
    def serialize_applications(self, applications: FrozenSet[Application]) -> List[str]:
        return sorted(a.value for a in applications)


class PartialConfig(GitOpsModel):
    """
    Configuration entered so far.

    Every top-level section may be absent. Sections that are present obey
    the same rules as in Config.
    """

    project: Optional[Project] = None
    environments: Optional[Tuple[Environment, ...]] = None
    features: Optional[Features] = None
    applications: Optional[FrozenSet[Application]] = None

    @field_validator("environments")
    @classmethod
    def validate_environments(
        cls, v: Optional[Tuple[Environment, ...]]
    ) -> Optional[Tuple[Environment, ...]]:
        return _check_environments(v)

    @field_serializer("applications")
    def serialize_applications(
        self, applications: Optional[FrozenSet[Application]]
    ) -> Optional[List[str]]:
        if applications is None:
            return None
        return sorted(a.value for a in applications)
