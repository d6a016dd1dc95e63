"""
Core value type, arithmetic backends, and serialization contracts.

This package is independent of any external system: the only runtime
collaborators are pydantic (model), jsonschema (contracts) and, optionally,
gmpy2 (GMP backend).
"""
