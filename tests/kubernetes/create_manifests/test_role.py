"""Tests for the role manifest."""

import copy
from typing import Any

import yaml

from artifactory_manifests.kubernetes.models import Values
from artifactory_manifests.kubernetes.create_manifests import create_manifest_arguments
from artifactory_manifests.kubernetes.create_manifests.models import ManifestArguments
from artifactory_manifests.kubernetes.create_manifests.role import create_role_manifest
from artifactory_manifests.lib.yaml_tools import dump_manifests

RULES = [
    {
        "apiGroups": [""],
        "resources": ["services", "endpoints", "pods"],
        "verbs": ["get", "watch", "list"],
    },
    {
        "apiGroups": ["apps"],
        "resources": ["deployments"],
        "resourceNames": ["artifactory"],
        "verbs": ["patch"],
        "x-unknown-field": {"kept": True},
    },
]


def test_role_manifest(manifest_args: ManifestArguments) -> None:
    """Test the role metadata and rules."""
    role = create_role_manifest(manifest_args)
    assert role == {
        "apiVersion": "rbac.authorization.k8s.io/v1",
        "kind": "Role",
        "metadata": {
            "name": "prod-artifactory",
            "labels": {
                "app": "artifactory",
                "chart": "artifactory-7.17.5",
                "component": "artifactory",
                "release": "prod",
                "heritage": "Helm",
            },
        },
        "rules": [{"apiGroups": [""], "resources": ["pods"], "verbs": ["get"]}],
    }


def test_role_rules_verbatim(
    values_dict: dict[str, Any], manifest_args: ManifestArguments
) -> None:
    """Test rules are copied without interpretation, unknown fields included."""
    values_dict["rbac"]["role"]["rules"] = copy.deepcopy(RULES)
    values = Values.model_validate(values_dict)
    args = create_manifest_arguments(
        values, manifest_args.release, manifest_args.template
    )

    role = create_role_manifest(args)
    assert role["rules"] == RULES

    # the rules also survive serialization
    doc = yaml.safe_load(dump_manifests([role]))
    assert doc["rules"] == RULES


def test_role_component_label(
    values_dict: dict[str, Any], manifest_args: ManifestArguments
) -> None:
    """Test the component label follows artifactory.name."""
    values_dict["artifactory"]["name"] = "artifactory-primary"
    values = Values.model_validate(values_dict)
    args = create_manifest_arguments(
        values, manifest_args.release, manifest_args.template
    )

    role = create_role_manifest(args)
    assert role["metadata"]["labels"]["component"] == "artifactory-primary"
    assert role["metadata"]["labels"]["app"] == "artifactory"
