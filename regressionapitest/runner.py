"""
Sequential request-and-validate loop.

Every API call is fetched once with a GET and its body is run through the
checks in ``CHECKS``. Check outcomes are only logged; a transport error
stops the run.
"""
from __future__ import annotations
from typing import Callable, Dict, List, NamedTuple, Optional, Tuple

import requests

from .common import http
from .common.logging import TRACE, get_logger
from .common.validators import validate_json, validate_not_null

log = get_logger("runner")


class RegressionApiTestError(Exception):
    pass


class RequestFailed(RegressionApiTestError):
    def __init__(self, url: str, cause: Exception):
        super().__init__(f"Error while getting response for: {url} ({cause})")
        self.url = url
        self.cause = cause


# (name, validator, success message)
Check = Tuple[str, Callable[[str], Optional[str]], str]

CHECKS: List[Check] = [
    ("not_null", validate_not_null, "response was not 'null'"),
    ("valid_json", validate_json, "response was a valid JSON"),
]


class CallResult(NamedTuple):
    api_call: str
    url: str
    failures: Dict[str, str]

    @property
    def passed(self) -> bool:
        return not self.failures


def parse_api_calls(value: str) -> List[str]:
    return [c.strip() for c in (value or "").split(",") if c.strip()]


def build_server_url(address: str) -> str:
    address = address.strip().rstrip("/")
    if address.lower().startswith(("http://", "https://")):
        return address
    return "http://" + address


def build_url(server_url: str, api_call: str) -> str:
    return server_url + "/" + api_call.lstrip("/")


def get_response_body(url: str) -> str:
    log.info("Requesting following url: %s", url)
    try:
        resp = http.get(url)
        body = resp.content.decode("utf-8", errors="replace")
    except requests.RequestException as e:
        log.error("Error while getting response for: %s (%s)", url, e)
        raise RequestFailed(url, e) from e
    log.log(TRACE, "Got following response body (HTTP %s): \n%s", resp.status_code, body)
    return body


def check_api_call(server_url: str, api_call: str,
                   checks: Optional[List[Check]] = None) -> CallResult:
    url = build_url(server_url, api_call)
    body = get_response_body(url)
    log.info("Checking API call: %s", api_call)

    failures: Dict[str, str] = {}
    for name, validate, ok_msg in checks or CHECKS:
        reason = validate(body)
        if reason:
            failures[name] = reason
            log.error("API call %s failed: %s", api_call, reason)
        else:
            log.info("API call %s succeeded: %s", api_call, ok_msg)
    return CallResult(api_call, url, failures)


def run(server_url: str, api_calls: List[str]) -> List[CallResult]:
    log.info("Creating requests for %s", server_url)
    results = [check_api_call(server_url, call) for call in api_calls]
    passed = sum(1 for r in results if r.passed)
    log.info("%d of %d API calls passed", passed, len(results))
    return results
