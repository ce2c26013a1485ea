"""
Shared utilities for external services.

- http.py - requests session with default timeout and User-Agent
"""
