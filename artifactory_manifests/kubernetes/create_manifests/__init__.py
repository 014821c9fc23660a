import logging
from .models import ManifestArguments
from ..models import *
from .labels import get_labels, get_component_labels
from .pvc import create_pvc_manifest
from .role import create_role_manifest
from .rolebinding import create_rolebinding_manifest

from typing import Any, Callable

_LOGGER = logging.getLogger(__name__)

# output order when every kind is requested
BUILDERS: dict[str, Callable[[ManifestArguments], dict[str, Any]]] = {
    'pvc': create_pvc_manifest,
    'role': create_role_manifest,
    'rolebinding': create_rolebinding_manifest,
}

def create_manifest_arguments(values: Values, release: ReleaseContext, template: TemplateContext) -> ManifestArguments:
    labels = get_labels(release, template)
    return ManifestArguments(
        values=values,
        release=release,
        template=template,
        labels=labels,
        component_labels=get_component_labels(values, labels),
    )

def create_manifests(values: Values, release: ReleaseContext, template: TemplateContext, kinds: list[str] | None = None) -> list[dict[str, Any]]:
    kinds = list(BUILDERS) if kinds is None else kinds
    for kind in kinds:
        if kind not in BUILDERS:
            raise ValueError(f"Unknown manifest kind: {kind}")

    args = create_manifest_arguments(values, release, template)
    manifests = []
    for kind in kinds:
        _LOGGER.debug("Building %s manifest", kind)
        manifests.append(BUILDERS[kind](args))

    return manifests
