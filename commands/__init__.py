"""CLI command modules.

This package contains:
- listing: Listing commands (list, scenes, rooms, shades, info)
- control: Direct control commands (scene, shade)
- setup: Setup, configure and help commands
- helpers: Shared helpers (hub construction, error reporting)
"""
