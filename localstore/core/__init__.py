"""
Core primitives shared across localstore.

Settings and the home-directory provider live here so that storage code never
looks up the current user directly.
"""
