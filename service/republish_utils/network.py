# 2026-10-19  republish_utils/network.py

import os

import requests

from republish_utils.errors import PackageNotFoundError
from republish_utils.node_ecosys import ValidRegistryJson


NPM_REGISTRY_URL_BEGIN = os.getenv(
    'REGISTRY', 'https://registry.npmjs.org'
).rstrip('/')
REQUEST_TIMEOUT_SECONDS = 60


def get_registry_json(package_name: str) -> ValidRegistryJson:
    """
    Download the json, which holds meta data of the package,
    from registry website.
    """
    registry_json_url = "{:s}/{:s}".format(
        NPM_REGISTRY_URL_BEGIN, package_name
    )

    r = requests.get(registry_json_url, timeout=REQUEST_TIMEOUT_SECONDS)
    if r.status_code == 404:
        raise PackageNotFoundError(package_name)
    r.raise_for_status()
    registry_json: ValidRegistryJson = r.json()

    return registry_json


def fetch_versions(package_name: str) -> list[str]:
    """All version strings the registry knows for `package_name`."""
    return list(get_registry_json(package_name)['versions'].keys())
