"""
Sequential smoke tests for JSON HTTP APIs.
"""
__version__ = "1.0.0"
