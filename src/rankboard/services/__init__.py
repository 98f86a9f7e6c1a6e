"""Services package - import from subdirectories directly.

Subpackages:
- config: Store and display settings
- leaderboard: Entry type and the snapshot synchronizer
- store: Remote record store adapters
"""
