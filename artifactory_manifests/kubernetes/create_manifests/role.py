from .models import *
from typing import Any
from kubernetes import client

def create_role_manifest(args: ManifestArguments) -> dict[str, Any]:
    role = client.V1Role(
        api_version=RBAC_API_VERSION,
        kind="Role",
        metadata=client.V1ObjectMeta(
            name=args.template.fullname,
            labels=args.component_labels,
        ),
        # plain dicts, so the rules survive serialization untouched
        rules=args.values.rbac.role.rules,
    )
    return client.ApiClient().sanitize_for_serialization(role) # type: ignore[no-any-return]
