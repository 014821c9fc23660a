from dataclasses import dataclass
from ..models import *

CORE_API_VERSION = 'v1'
RBAC_API_GROUP = 'rbac.authorization.k8s.io'
RBAC_API_VERSION = f'{RBAC_API_GROUP}/v1'

@dataclass
class ManifestArguments:
    values: Values
    release: ReleaseContext
    template: TemplateContext
    labels: dict[str, str]
    component_labels: dict[str, str]
