import logging
import yaml
from ..lib.yaml_tools import deep_merge, unflatten_key, load_file as load_yaml_file
from .models import ChartMetadata, ReleaseContext, Values, validate_chart, validate_values
from .naming import build_template_context
from types import SimpleNamespace

_LOGGER = logging.getLogger(__name__)

def parse_override(override: str) -> dict:
    """turn 'a.b.c=value' into {'a': {'b': {'c': value}}}, a dot escaped as \\. stays in the key"""
    if '=' not in override:
        raise ValueError(f"Malformed override, expected key=value: {override}")
    key, raw_value = override.split('=', 1)
    key = key.strip()
    if not key:
        raise ValueError(f"Malformed override, missing key: {override}")
    # scalars follow yaml typing, so 'true' and '3' are not strings
    value = yaml.safe_load(raw_value) if raw_value else ''
    return unflatten_key(key, value)

def merge_values(sources: list[dict]) -> dict:
    merged: dict = {}
    for source in sources:
        merged = deep_merge(merged, source)
    return merged

def load_values(files: list[str], overrides: list[str] | None = None) -> Values:
    sources = []
    for fn in files:
        _LOGGER.debug("Loading values file %s", fn)
        data = load_yaml_file(fn)
        if data is None:
            continue
        if not isinstance(data, dict):
            raise ValueError(f"Values file {fn} must contain a mapping")
        sources.append(data)
    for override in overrides or []:
        _LOGGER.debug("Applying override %s", override)
        sources.append(parse_override(override))
    return validate_values(merge_values(sources))

def load_chart(fn: str) -> ChartMetadata:
    _LOGGER.debug("Loading chart metadata %s", fn)
    data = load_yaml_file(fn)
    if not isinstance(data, dict):
        raise ValueError(f"Chart file {fn} must contain a mapping")
    return validate_chart(data)

def build_vars(values_files: list[str], overrides: list[str] | None, chart_file: str, release_name: str, release_service: str):
    values = load_values(values_files, overrides)
    chart = load_chart(chart_file)
    release = ReleaseContext(name=release_name, service=release_service)
    template = build_template_context(chart, release, values)
    _LOGGER.debug("Resolved fullname %s, service account %s", template.fullname, template.service_account_name)
    return SimpleNamespace(values=values, release=release, template=template)
