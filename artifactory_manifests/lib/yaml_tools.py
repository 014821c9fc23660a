import yaml, functools, os, re
from typing import Any

def represent_none(dumper, _):
    return dumper.represent_scalar('tag:yaml.org,2002:null', '')

def _represent_str(dumper, data):
    """
        configures yaml for dumping multiline strings
        Ref: https://stackoverflow.com/questions/8640959/how-can-i-control-what-scalar-form-pyyaml-uses-for-my-data

        Trailing newlines are kept, so such strings fall back to the default style and round trip unchanged.
    """

    if data.count('\n') > 0:
        return dumper.represent_scalar('tag:yaml.org,2002:str', data, style='|')
    return dumper.represent_scalar('tag:yaml.org,2002:str', data)

yaml.add_representer(type(None), represent_none)
yaml.add_representer(str, _represent_str)

# split on dots, except escaped ones: 'a.b\.c' -> ['a', 'b.c']
_KEY_SEPARATOR = re.compile(r'(?<!\\)\.')

def unflatten_key(key: str, value: Any) -> dict:
    """wrap value in one mapping per key path segment, so ('a.b', 1) becomes {'a': {'b': 1}}"""
    parts = [part.replace('\\.', '.') for part in _KEY_SEPARATOR.split(key)]
    if any(not part for part in parts):
        raise ValueError(f"Empty segment in key path: {key}")
    return functools.reduce(lambda inner, part: {part: inner}, reversed(parts), value)

def load_file(fn) -> Any:
    if not os.path.isfile(fn):
        raise ValueError(f"Could not find file {fn}")

    with open(fn, 'r') as f:
        return yaml.safe_load(f)

# deep merge two dictionaries created from yaml
# mappings merge recursively, anything else from d2 replaces d1, the way helm merges values
def deep_merge(d1, d2):
    result = d1.copy()
    for k, v in d2.items():
        if isinstance(v, dict) and isinstance(result.get(k), dict):
            result[k] = deep_merge(result[k], v)
        else:
            result[k] = v
    return result

class NoAliasDumper(yaml.Dumper):
    def ignore_aliases(self, data):
        return True

def dump_manifests(manifests: list[dict[str, Any]]) -> str:
    manifests_string = ''
    for manifest in manifests:
        manifests_string += '---\n'
        manifests_string += yaml.dump(manifest, default_flow_style=False, Dumper=NoAliasDumper)
    return manifests_string
