from __future__ import annotations
import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry
from .config import HTTP_TIMEOUT, HTTP_RETRIES, APP_NAME, APP_VERSION

USER_AGENT = f"{APP_NAME}/{APP_VERSION}"

def make_session(retries: int = HTTP_RETRIES) -> requests.Session:
    s = requests.Session()
    retry = Retry(
        total=retries,
        read=retries,
        connect=retries,
        backoff_factor=0.5,
        status_forcelist=(429, 500, 502, 503, 504),
        allowed_methods=("HEAD", "GET"),
        raise_on_status=False,
    )
    s.mount("https://", HTTPAdapter(max_retries=retry))
    s.mount("http://", HTTPAdapter(max_retries=retry))
    s.headers["User-Agent"] = USER_AGENT
    return s

HTTP = make_session()
TIMEOUT = HTTP_TIMEOUT
RETRIES = HTTP_RETRIES

def configure(timeout: float | None = None, retries: int | None = None) -> None:
    """Swap the shared session/timeout, e.g. from command-line flags."""
    global HTTP, TIMEOUT, RETRIES
    if timeout is not None:
        TIMEOUT = timeout
    if retries is not None and retries != RETRIES:
        HTTP.close()
        HTTP = make_session(retries)
        RETRIES = retries

def get(url, **kwargs):
    kwargs.setdefault("timeout", TIMEOUT)
    return HTTP.get(url, **kwargs)
