from pydantic import BaseModel, ConfigDict, Field
from typing import Any

# Values are written in camelCase, so every model accepts both the yaml alias and the field name

class ValuesModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

# Persistence specification
class PersistenceValues(ValuesModel):
    annotations: dict[str, str] | None = None
    access_modes: list[str] = Field(alias='accessModes')
    # passed through as given, kubernetes also accepts a plain byte count
    size: str | int
    storage_class: str | None = Field(default=None, alias='storageClass')

class ArtifactoryValues(ValuesModel):
    name: str
    persistence: PersistenceValues

# RBAC specification
class RoleValues(ValuesModel):
    # copied verbatim into the role, never interpreted
    rules: list[dict[str, Any]]

class RbacValues(ValuesModel):
    role: RoleValues

class ServiceAccountValues(ValuesModel):
    create: bool = Field(default=True)
    name: str | None = None

# Root values definition
class Values(ValuesModel):
    name_override: str | None = Field(default=None, alias='nameOverride')
    fullname_override: str | None = Field(default=None, alias='fullnameOverride')
    service_account: ServiceAccountValues = Field(default_factory=ServiceAccountValues, alias='serviceAccount')
    artifactory: ArtifactoryValues
    rbac: RbacValues

class ChartMetadata(ValuesModel):
    name: str
    version: str
    app_version: str | None = Field(default=None, alias='appVersion')

class ReleaseContext(BaseModel):
    name: str
    service: str = Field(default='Helm')

class TemplateContext(BaseModel):
    name: str
    chart: str
    fullname: str
    service_account_name: str


def validate_values(values: dict) -> Values:
    return Values.model_validate(values)

def validate_chart(chart: dict) -> ChartMetadata:
    return ChartMetadata.model_validate(chart)
