"""
Domain Services Package

Architectural Intent:
- Contains domain services implementing business logic
"""

from cairn.domain.services.credential_validation import (
    CredentialValidator,
    RequiredField,
    CIVO_REQUIRED_FIELDS,
    civo_credential_validator,
)

__all__ = [
    "CredentialValidator",
    "RequiredField",
    "CIVO_REQUIRED_FIELDS",
    "civo_credential_validator",
]
