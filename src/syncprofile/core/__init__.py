"""Core logic of the sync profile package.

- profile: profile tree, sync profile aggregate, retry and schedule decisions
- schedule: periodic schedule calculation
- log: history of sync results
"""

__all__: list[str] = []
