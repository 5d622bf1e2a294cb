import pytest

from startup_gitops import reporting
from startup_gitops.exceptions import InvariantError, ShapeError
from startup_gitops.models.environment import EnvironmentValidationResult
from startup_gitops.validation import validate


def test_report_environment_valid_with_warning(capsys):
    result = EnvironmentValidationResult(warnings=["token looks odd"])

    reporting.report_environment(result)

    out = capsys.readouterr().out
    assert "Warning: token looks odd" in out
    assert "Environment is ready for deployment." in out


def test_report_environment_missing(capsys):
    reporting.report_environment(EnvironmentValidationResult(missing=["DIGITALOCEAN_TOKEN"]))

    out = capsys.readouterr().out
    assert "• DIGITALOCEAN_TOKEN" in out
    assert "Create a .env file" in out
    assert "ready for deployment" not in out


def test_report_shape_error(capsys, document):
    document["project"]["email"] = "nope"
    with pytest.raises(ShapeError) as exc_info:
        validate(document)

    reporting.report_validation_error(exc_info.value)

    out = capsys.readouterr().out
    assert "Configuration validation failed:" in out
    assert "project.email" in out


def test_report_invariant_error(capsys, document, cluster):
    cluster["maxNodes"] = 1
    with pytest.raises(InvariantError) as exc_info:
        validate(document)

    reporting.report_validation_error(exc_info.value)

    out = capsys.readouterr().out
    assert "Configuration violates cluster sizing rules:" in out
    assert "environments.0" in out


def test_report_config_summary(capsys, document):
    document["applications"] = ["mattermost", "keycloak"]
    document["features"] = {"backup": False}

    reporting.report_config_summary(validate(document))

    out = capsys.readouterr().out
    assert "Project: acme-platform" in out
    assert "1 environment (production)" in out
    assert "Applications: keycloak, mattermost" in out
    assert "Features: monitoring, ssl" in out
