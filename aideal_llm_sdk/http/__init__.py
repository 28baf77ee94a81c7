"""HTTP API layer for the AI router.

This module provides FastAPI integration for the SDK.
It's an optional component that requires the 'http' extra to be installed:

    pip install aideal-llm-sdk[http]
"""
