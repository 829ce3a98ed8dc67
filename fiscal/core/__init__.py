"""
Core domain models, money primitives and payload contracts.

Independent of external systems (database, web framework, tax authority
web services).
"""
