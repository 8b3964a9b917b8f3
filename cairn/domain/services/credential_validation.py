"""
Credential Validation Service

Architectural Intent:
- Post-condition checks on freshly issued provider credentials before they
  are trusted and persisted
- Some providers answer a credential request successfully while leaving fields
  blank; those results must never reach the cluster record
- On failure, a compensating delete removes whatever was partially created so
  a retry starts from a clean slate

Domain Logic:
- Required fields are checked in a fixed order; the first blank one is reported
- A failed compensating delete is raised instead of the validation error, with
  the validation error chained as its cause
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional

from cairn.domain.errors import CompensationError, CredentialValidationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RequiredField:
    label: str
    attribute: str


CIVO_REQUIRED_FIELDS = (
    RequiredField("AccessKeyID", "access_key_id"),
    RequiredField("ID", "id"),
    RequiredField("Name", "name"),
    RequiredField("SecretAccessKeyID", "secret_access_key_id"),
)


class CredentialValidator:
    """Checks a provider-native credential object for blank required fields."""

    def __init__(self, provider: str, required_fields: tuple[RequiredField, ...]):
        self.provider = provider
        self.required_fields = required_fields

    def first_missing_field(self, credentials: Any) -> Optional[str]:
        if credentials is None:
            return self.required_fields[0].label if self.required_fields else None
        for required in self.required_fields:
            if not getattr(credentials, required.attribute, None):
                return required.label
        return None

    def validate(
        self,
        credentials: Any,
        compensate: Optional[Callable[[], None]] = None,
        bucket_name: str = "",
    ) -> None:
        """
        Raise CredentialValidationError for the first blank field.

        When compensate is given it runs exactly once before the error is
        raised. If it fails, CompensationError is raised instead.
        """
        missing = self.first_missing_field(credentials)
        if missing is None:
            return

        error = CredentialValidationError(self.provider, missing)
        logger.warning("%s", error)

        if compensate is None:
            raise error

        try:
            compensate()
        except Exception as exc:
            logger.error(
                "Compensating delete of %s credentials for %s failed: %s",
                self.provider,
                bucket_name,
                exc,
            )
            raise CompensationError(self.provider, bucket_name, exc) from error

        logger.info(
            "Removed partial %s credentials for bucket %s", self.provider, bucket_name
        )
        raise error


def civo_credential_validator() -> CredentialValidator:
    return CredentialValidator("civo", CIVO_REQUIRED_FIELDS)
