"""
Persistence adapters.

Only the filesystem JSON backend exists; DocumentStore depends on these
helpers rather than opening files itself.
"""
