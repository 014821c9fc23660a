from ..models import *

def get_labels(release: ReleaseContext, template: TemplateContext) -> dict[str, str]:
    return {
        'app': template.name,
        'chart': template.chart,
        'release': release.name,
        'heritage': release.service,
    }

def get_component_labels(values: Values, labels: dict[str, str]) -> dict[str, str]:
    return labels | { 'component': values.artifactory.name }
