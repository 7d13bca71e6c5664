"""Core functionality for PowerView control.

This package contains:
- hub: Hub class for HTTP communication with the PowerView hub
- decode: Decoding of hub JSON responses into typed records
- config: Hub address and timeout configuration
- errors: Exception hierarchy
"""
