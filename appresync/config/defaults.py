# appresync Default Configuration
# Default configuration as Python dict and YAML generator

import copy
from typing import Any

import yaml

DEFAULT_CONFIG: dict[str, Any] = {
    "api": {
        "endpoint": "https://api.inngest.com/gql",
        "token": None,
        "timeout": 30.0,
    },
    "environment": {
        "id": None,
        "slug": "production",
    },
    "output": {
        "verbose": False,
        "colored": True,
    },
}


def default_config() -> dict[str, Any]:
    """Return a deep copy of the default configuration."""
    return copy.deepcopy(DEFAULT_CONFIG)


def generate_default_config() -> str:
    """Generate default configuration as YAML string with comments."""
    header = """# appresync Configuration
#
# api.endpoint:    GraphQL endpoint receiving the ResyncApp mutation
# api.token:       Bearer token (leave empty for unauthenticated dev servers)
# environment.id:  UUID of the environment the apps are registered in
#
# The location of this file can be overridden with APPRESYNC_CONFIG.

"""
    return header + yaml.dump(DEFAULT_CONFIG, default_flow_style=False, sort_keys=False, allow_unicode=True)
