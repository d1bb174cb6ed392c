"""
HTTP calls from the command-line client to the fortune server.
"""

import http.client
import json
import urllib.request, urllib.error
from typing import Any, Dict

from .client_config import ClientConfig


class RequestFailed(Exception):
    pass


def post_json(url: str, payload: Dict[str, Any]) -> Dict[str, Any]:
    """
    POST payload as JSON and return the decoded JSON object.

    Any status other than 200, a transport failure or an undecodable body
    raises RequestFailed with a message fit for the user.
    """
    req = urllib.request.Request(
        url,
        data=json.dumps(payload).encode("utf-8"),
        headers={"Content-Type": "application/json"},
        method="POST",
    )
    try:
        with urllib.request.urlopen(req) as resp:
            status = resp.status
            data = resp.read()
    except urllib.error.HTTPError as e:
        e.close()
        raise RequestFailed(f"Bad response: {e.code} {e.reason}")
    except urllib.error.URLError as e:
        raise RequestFailed(f"Request failed: {e.reason}")
    except (http.client.HTTPException, OSError) as e:
        # raised by getresponse() and read(), which urlopen doesn't wrap
        raise RequestFailed(f"Request failed: {e}")
    if status != 200:
        raise RequestFailed(f"Bad response: {status}")
    try:
        result = json.loads(data.decode("utf-8"))
    except (UnicodeDecodeError, ValueError) as e:
        raise RequestFailed(f"Bad response data: {e}")
    if not isinstance(result, dict):
        raise RequestFailed("Bad response data: expected a JSON object")
    return result


def _require(result: Dict[str, Any], *fields: str) -> Dict[str, Any]:
    missing = [f for f in fields if f not in result]
    if missing:
        raise RequestFailed(f"Bad response data: missing {', '.join(missing)}")
    return result


def pick(config: ClientConfig) -> Dict[str, Any]:
    result = post_json(config.server_url + "/pick", {"username": config.user.name})
    return _require(result, "content", "author", "creator")


def create(config: ClientConfig, content: str, author: str) -> Dict[str, Any]:
    result = post_json(config.server_url + "/create", {
        "content": content,
        "author": author,
        "username": config.user.name,
    })
    return _require(result, "all_count", "user_count")


def stats(config: ClientConfig) -> Dict[str, Any]:
    result = post_json(config.server_url + "/stats", {"username": config.user.name})
    return _require(result, "all_count", "user_count", "all_visits", "today_visits")
