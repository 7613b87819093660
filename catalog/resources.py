"""Access to the static catalog resources (local directory or HTTP base URL)"""
import json
import os

import requests
from config import Config


class ResourceError(Exception):
    """A catalog resource is missing, unreadable or malformed"""


def resource_location(path):
    if Config.DATA_BASE_URL:
        return f"{Config.DATA_BASE_URL.rstrip('/')}/{path.lstrip('/')}"
    return os.path.join(Config.DATA_ROOT, *path.split('/'))


def read_resource(path):
    """
    Read a resource as bytes

    Args:
        path: slash-separated path relative to the data root

    Raises:
        ResourceError: resource is unavailable
    """
    location = resource_location(path)

    if Config.DATA_BASE_URL:
        try:
            response = requests.get(location, timeout=Config.REQUEST_TIMEOUT)
            response.raise_for_status()
        except requests.RequestException as e:
            raise ResourceError(f"Cannot fetch {location}: {e}") from e
        return response.content

    try:
        with open(location, 'rb') as f:
            return f.read()
    except OSError as e:
        raise ResourceError(f"Cannot read {location}: {e}") from e


def read_text(path):
    try:
        return read_resource(path).decode('utf-8')
    except UnicodeDecodeError as e:
        raise ResourceError(f"{path} is not valid UTF-8: {e}") from e


def read_json(path):
    try:
        return json.loads(read_text(path))
    except ValueError as e:
        raise ResourceError(f"{path} is not valid JSON: {e}") from e
