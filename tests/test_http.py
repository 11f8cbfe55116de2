import pytest

from regressionapitest.common import http


@pytest.mark.parametrize("retries", [0, 3])
def test_make_session_retry_policy(retries):
    s = http.make_session(retries)
    try:
        for prefix in ("http://", "https://"):
            retry = s.get_adapter(prefix + "example.org").max_retries
            assert retry.total == retries
            assert retry.connect == retries
            assert retry.read == retries
            assert set(retry.allowed_methods) == {"GET", "HEAD"}
            assert 503 in retry.status_forcelist
            assert retry.raise_on_status is False
        assert s.headers["User-Agent"] == http.USER_AGENT
    finally:
        s.close()


def test_configure_keeps_session_when_retries_unchanged(fake_http):
    http.configure(timeout=12, retries=http.RETRIES)
    assert http.HTTP is fake_http
    assert http.TIMEOUT == 12
