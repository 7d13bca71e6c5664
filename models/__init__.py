"""Domain model and utility functions.

This package contains:
- entities: Scene, Room and Shade handles bound to a hub
- collections: Scenes, Rooms and Shades listing snapshots
- types: Wire-level TypedDicts and endpoint paths
- utils: Utility functions (position conversion, fuzzy matching)
"""
