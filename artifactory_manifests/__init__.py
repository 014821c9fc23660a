"""
artifactory-manifests - renders the artifactory PersistentVolumeClaim, Role and RoleBinding

Values are validated once with pydantic, resources are assembled with kubernetes-client models
and printed as yaml. Nothing here talks to a cluster.
"""
