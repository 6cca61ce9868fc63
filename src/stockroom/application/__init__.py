"""Application layer - use cases orchestrating the domain.

Organized as:
- commands: write operations (create, update, delete items)
- queries: read operations (listings, activity, statistics)
- services: cross-cutting use cases (authentication)
- dtos: immutable result objects returned by queries
"""
