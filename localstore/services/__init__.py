"""
High-level use cases for localstore.

DocumentStore orchestrates path resolution and the JSON storage helpers; callers
should go through it instead of touching document files directly.
"""
