from .models import *
from typing import Any
from kubernetes import client

def create_rolebinding_manifest(args: ManifestArguments) -> dict[str, Any]:
    rolebinding = client.V1RoleBinding(
        api_version=RBAC_API_VERSION,
        kind="RoleBinding",
        metadata=client.V1ObjectMeta(
            name=args.template.fullname,
            labels=args.component_labels,
        ),
        # a list as the RoleBinding schema requires, the original chart emitted a single mapping
        subjects=[client.RbacV1Subject(
            kind="ServiceAccount",
            name=args.template.service_account_name,
        )],
        # same name as the role created by create_role_manifest
        role_ref=client.V1RoleRef(
            kind="Role",
            api_group=RBAC_API_GROUP,
            name=args.template.fullname,
        )
    )
    return client.ApiClient().sanitize_for_serialization(rolebinding) # type: ignore[no-any-return]
