"""
Run against a live server: API_URL=http://127.0.0.1:5000 pytest tests/smoke_test.py
"""
import os

import pytest

from regressionapitest import runner

API_URL = os.getenv("API_URL")
API_CALLS = os.getenv("API_CALLS", "api/ping")


@pytest.mark.skipif(not API_URL, reason="API_URL is not provided")
def test_live_api_calls():
    results = runner.run(runner.build_server_url(API_URL), runner.parse_api_calls(API_CALLS))
    failed = {r.api_call: r.failures for r in results if not r.passed}
    assert not failed, failed
