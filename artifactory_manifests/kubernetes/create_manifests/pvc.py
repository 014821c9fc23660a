from .models import *
from typing import Any
from kubernetes import client

def create_pvc_manifest(args: ManifestArguments) -> dict[str, Any]:
    persistence = args.values.artifactory.persistence

    # no validation of access modes or size, they are passed through as given
    pvc = client.V1PersistentVolumeClaim(
        api_version=CORE_API_VERSION,
        kind="PersistentVolumeClaim",
        metadata=client.V1ObjectMeta(
            name=args.template.fullname,
            labels=args.labels,
            annotations=persistence.annotations,
        ),
        spec=client.V1PersistentVolumeClaimSpec(
            access_modes=persistence.access_modes,
            resources=client.V1VolumeResourceRequirements(
                requests={ "storage": persistence.size }
            ),
            storage_class_name=persistence.storage_class,
        )
    )
    return client.ApiClient().sanitize_for_serialization(pvc) # type: ignore[no-any-return]
