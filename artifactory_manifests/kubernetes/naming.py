"""
Naming conventions shared by every manifest.

These mirror the helpers a helm chart normally keeps in _helpers.tpl:
kubernetes names are limited to 63 characters and may not end in a dash.
"""
from .models import ChartMetadata, ReleaseContext, TemplateContext, Values

MAX_NAME_LENGTH = 63
DEFAULT_SERVICE_ACCOUNT = 'default'

def trunc_name(s: str) -> str:
    return s[:MAX_NAME_LENGTH].removesuffix('-')

def get_name(chart: ChartMetadata, values: Values) -> str:
    return trunc_name(values.name_override or chart.name)

def get_fullname(chart: ChartMetadata, release: ReleaseContext, values: Values) -> str:
    if values.fullname_override:
        return trunc_name(values.fullname_override)
    name = values.name_override or chart.name
    if name in release.name:
        return trunc_name(release.name)
    return trunc_name(f'{release.name}-{name}')

def get_chart_label(chart: ChartMetadata) -> str:
    return trunc_name(f'{chart.name}-{chart.version}'.replace('+', '_'))

def get_service_account_name(values: Values, fullname: str) -> str:
    if values.service_account.create:
        return values.service_account.name or fullname
    return values.service_account.name or DEFAULT_SERVICE_ACCOUNT

def build_template_context(chart: ChartMetadata, release: ReleaseContext, values: Values) -> TemplateContext:
    fullname = get_fullname(chart, release, values)
    return TemplateContext(
        name=get_name(chart, values),
        chart=get_chart_label(chart),
        fullname=fullname,
        service_account_name=get_service_account_name(values, fullname),
    )
