"""Shared fixtures for rendering manifests."""

from typing import Any

import pytest

from artifactory_manifests.kubernetes.models import (
    ChartMetadata,
    ReleaseContext,
    TemplateContext,
    Values,
)
from artifactory_manifests.kubernetes.naming import build_template_context
from artifactory_manifests.kubernetes.create_manifests import (
    create_manifest_arguments,
)
from artifactory_manifests.kubernetes.create_manifests.models import (
    ManifestArguments,
)


@pytest.fixture(name="values_dict")
def mock_values_dict() -> dict[str, Any]:
    """Fixture for raw values as they would be loaded from yaml."""
    return {
        "artifactory": {
            "name": "artifactory",
            "persistence": {
                "annotations": {"helm.sh/resource-policy": "keep"},
                "accessModes": ["ReadWriteOnce"],
                "size": "10Gi",
                "storageClass": "standard",
            },
        },
        "rbac": {
            "role": {
                "rules": [
                    {"apiGroups": [""], "resources": ["pods"], "verbs": ["get"]},
                ],
            },
        },
    }


@pytest.fixture(name="values")
def mock_values(values_dict: dict[str, Any]) -> Values:
    """Fixture for validated values."""
    return Values.model_validate(values_dict)


@pytest.fixture(name="chart")
def mock_chart() -> ChartMetadata:
    """Fixture for chart metadata."""
    return ChartMetadata(name="artifactory", version="7.17.5")


@pytest.fixture(name="release")
def mock_release() -> ReleaseContext:
    """Fixture for the release being rendered."""
    return ReleaseContext(name="prod", service="Helm")


@pytest.fixture(name="template")
def mock_template(
    chart: ChartMetadata, release: ReleaseContext, values: Values
) -> TemplateContext:
    """Fixture for the derived names."""
    return build_template_context(chart, release, values)


@pytest.fixture(name="manifest_args")
def mock_manifest_args(
    values: Values, release: ReleaseContext, template: TemplateContext
) -> ManifestArguments:
    """Fixture for the arguments every builder receives."""
    return create_manifest_arguments(values, release, template)
