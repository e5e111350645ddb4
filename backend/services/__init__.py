"""
Service layer: use-case orchestration over repositories.
"""
