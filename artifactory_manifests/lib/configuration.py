import logging, os

DEBUG_ENV_VAR = 'DEBUG'

def parse_bool_env_var(var_name, default=False):
    value = os.getenv(var_name)
    if value is None:
        return default
    value_str = str(value).strip().lower()
    return value_str in ('true', '1') or \
           (value_str.isdigit() and int(value_str) != 0)

def is_debug() -> bool:
    return parse_bool_env_var(DEBUG_ENV_VAR)

def configure_logging(debug: bool):
    # stdout is reserved for manifests
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
    )
