from .build_vars import build_vars, load_values, load_chart
from .create_manifests import create_manifests
from .naming import build_template_context

__all__ = ['build_vars', 'load_values', 'load_chart', 'create_manifests', 'build_template_context']
