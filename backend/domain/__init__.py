"""
Domain Layer

This package contains the core business domain logic, separated from
persistence concerns and infrastructure.

Structure:
- value_objects/: Immutable value types without identity
- user_transform: Mapping between request/response DTOs and stored users
"""
