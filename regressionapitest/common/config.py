"""
Centralized configuration for the API regression test.
Values here are only defaults; command-line flags override them.
"""
import os

from .. import __version__

APP_NAME = os.getenv("APP_NAME", "regressionapitest")
APP_VERSION = os.getenv("APP_VERSION", __version__)

SERVER_ADDRESS = os.getenv("SERVER_ADDRESS", "")
API_CALLS = os.getenv("API_CALLS", "api/v1/wikifolios,api/v1/trades,api/v1/import/wikifolios")

LOG_FILE = os.getenv("LOG_FILE", "regressionapitest.log")
LOG_LEVEL = os.getenv("LOG_LEVEL", "Info")
LOG_FORMAT = os.getenv("LOG_FORMAT", "text")

HTTP_TIMEOUT = float(os.getenv("HTTP_TIMEOUT", "300"))
HTTP_RETRIES = int(os.getenv("HTTP_RETRIES", "0"))
