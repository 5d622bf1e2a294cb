"""Unit tests for configuration models."""

import pydantic
import pytest

from startup_gitops.models.config import (
    Application,
    Cluster,
    Config,
    EnvironmentName,
    Features,
    Project,
    node_bounds_hold,
)


class TestProject:
    """Test Project validation."""

    def test_valid_project(self):
        """Test valid project metadata."""
        project = Project(name="acme-platform", domain="acme.io", email="admin@acme.io")

        assert project.name == "acme-platform"
        assert project.description is None

    @pytest.mark.parametrize("name", ["Acme", "acme_platform", "acme platform", "a" * 51, ""])
    def test_invalid_name(self, name):
        """Test names outside lowercase alphanumerics and hyphens, or too long."""
        with pytest.raises(pydantic.ValidationError):
            Project(name=name, domain="acme.io", email="admin@acme.io")

    def test_name_pattern_message(self):
        """Test the message shown for a malformed name."""
        with pytest.raises(pydantic.ValidationError) as exc_info:
            Project(name="Acme", domain="acme.io", email="admin@acme.io")

        assert "only lowercase letters, numbers, and hyphens" in str(exc_info.value)

    @pytest.mark.parametrize("domain", ["Acme.io", "acme_io", "https://acme.io", ""])
    def test_invalid_domain(self, domain):
        """Test domains that are not lowercase hostnames."""
        with pytest.raises(pydantic.ValidationError):
            Project(name="acme", domain=domain, email="admin@acme.io")

    def test_invalid_email(self):
        """Test a malformed contact email."""
        with pytest.raises(pydantic.ValidationError) as exc_info:
            Project(name="acme", domain="acme.io", email="not-an-email")

        assert "Valid email address is required" in str(exc_info.value)

    @pytest.mark.parametrize("email", ["admin@acme.local", "ops@acme.test", "root@localhost.localdomain"])
    def test_special_use_domain_email(self, email):
        """Test that internal and special-use mail domains are accepted."""
        project = Project(name="acme", domain="acme.local", email=email)

        assert project.email == email


class TestCluster:
    """Test Cluster field constraints."""

    def test_defaults(self):
        """Test optional cluster settings."""
        cluster = Cluster(region="nyc3", nodeSize="s-2vcpu-4gb", nodeCount=1)

        assert cluster.min_nodes is None
        assert cluster.max_nodes is None
        assert cluster.ha_control_plane is False
        assert cluster.version is None

    def test_snake_case_names_accepted(self):
        """Test that attribute names work as input keys too."""
        cluster = Cluster(region="nyc3", node_size="s-2vcpu-4gb", node_count=2)

        assert cluster.node_size == "s-2vcpu-4gb"
        assert cluster.node_count == 2

    @pytest.mark.parametrize(
        "overrides",
        [
            {"nodeCount": 0},
            {"nodeCount": "3"},
            {"nodeCount": 2.5},
            {"nodeCount": 3.0},
            {"maxNodes": 5.0},
            {"nodeCount": True},
            {"minNodes": 0},
            {"maxNodes": 101},
            {"region": ""},
            {"nodeSize": ""},
            {"haControlPlane": "yes"},
        ],
    )
    def test_invalid_fields(self, overrides):
        """Test each field's own constraint."""
        data = {"region": "nyc3", "nodeSize": "s-2vcpu-4gb", "nodeCount": 3, **overrides}

        with pytest.raises(pydantic.ValidationError):
            Cluster(**data)


class TestNodeBounds:
    """Test the node-count ordering rule."""

    @pytest.mark.parametrize(
        ("node_count", "min_nodes", "max_nodes", "expected"),
        [
            (3, None, None, True),
            (3, 2, 5, True),
            (3, 3, 3, True),
            (3, 1, None, True),
            (3, None, 100, True),
            (3, 5, None, False),
            (3, None, 2, False),
            (3, 5, 2, False),
            (3, 4, 10, False),
        ],
    )
    def test_node_bounds_hold(self, node_count, min_nodes, max_nodes, expected):
        assert node_bounds_hold(node_count, min_nodes, max_nodes) is expected


class TestFeatures:
    """Test feature flags."""

    def test_defaults(self):
        """Test documented defaults."""
        features = Features()

        assert features.email is False
        assert features.monitoring is True
        assert features.backup is True
        assert features.ssl is True

    def test_enabled(self):
        """Test listing enabled features in declaration order."""
        features = Features(email=True, backup=False)

        assert features.enabled() == ["email", "monitoring", "ssl"]


class TestConfig:
    """Test Config parsing."""

    def test_minimal_config(self, document):
        """Test defaults for features and applications."""
        config = Config.model_validate(document)

        assert config.project.name == "acme-platform"
        assert config.environments[0].name == EnvironmentName.PRODUCTION
        assert config.features == Features()
        assert config.applications == frozenset()

    def test_applications_are_a_set(self, document):
        """Test that duplicate applications collapse."""
        document["applications"] = ["keycloak", "mailu", "keycloak"]

        config = Config.model_validate(document)

        assert config.applications == {Application.KEYCLOAK, Application.MAILU}

    def test_frozen(self, document):
        """Test that validated configuration cannot be modified."""
        config = Config.model_validate(document)

        with pytest.raises(pydantic.ValidationError):
            config.project.name = "other"

    def test_to_document(self, document):
        """Test serialization back to the document's key names."""
        document["applications"] = ["nextcloud", "keycloak"]
        config = Config.model_validate(document)

        data = config.to_document()

        assert data["applications"] == ["keycloak", "nextcloud"]
        assert data["environments"][0]["cluster"]["nodeSize"] == "s-2vcpu-4gb"
        assert "minNodes" not in data["environments"][0]["cluster"]
        assert "description" not in data["project"]
        assert data["features"] == {
            "email": False,
            "monitoring": True,
            "backup": True,
            "ssl": True,
        }
