"""
Core utilities shared across the Delfis API.

This package hosts:
- configuration helpers (env vars, paths, feature flags)
- logging setup
- password hashing
- field revalidation for partial updates
"""
