"""
Core utilities shared across the realty site API.

This package hosts configuration helpers (env vars, feature flags) and the
logging setup used by the app factory and the scripts.
"""
