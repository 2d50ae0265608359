"""Unified calculator exception taxonomy.

Provides a shared base exception hierarchy for every calculation stage.
Each domain exception inherits from ``LandAreaError`` and carries
structured context fields so that the HTTP boundary can report failures
consistently.

Taxonomy categories
-------------------
- ``ValidationError``   — input violations (bad coordinate, too few points).
- ``ContractError``     — request payload does not match the expected shape.

Every exception exposes ``to_error_dict()`` for a stable structured
error payload suitable for JSON responses and logging.
"""

from __future__ import annotations


class LandAreaError(Exception):
    """Base exception for all calculator-domain errors.

    Attributes:
        message: Human-readable error description.
        stage: Calculation stage where the error occurred
            (e.g. ``"parse_dms"``, ``"calculate_area"``).
        code: Machine-readable error code (e.g. ``"MALFORMED_COORDINATE"``).
        correlation_id: Request correlation identifier.
    """

    #: Default stage for subclasses (override via class attribute or kwarg).
    default_stage: str = ""
    #: Default code for subclasses (override via class attribute or kwarg).
    default_code: str = ""

    def __init__(
        self,
        message: str = "",
        *,
        stage: str = "",
        code: str = "",
        correlation_id: str = "",
    ) -> None:
        self.message = message
        self.stage = stage or self.default_stage
        self.code = code or self.default_code
        self.correlation_id = correlation_id
        super().__init__(message)

    @property
    def category(self) -> str:
        """Return the error category based on concrete class."""
        if isinstance(self, ContractError):
            return "contract"
        if isinstance(self, ValidationError):
            return "validation"
        return "internal"

    def to_error_dict(self) -> dict[str, object]:
        """Return a structured error payload with stable keys."""
        return {
            "category": self.category,
            "code": self.code,
            "stage": self.stage,
            "message": self.message,
            "correlation_id": self.correlation_id,
        }


# ---------------------------------------------------------------------------
# Category base classes
# ---------------------------------------------------------------------------


class ValidationError(LandAreaError):
    """Input or domain-model validation failure."""


class ContractError(LandAreaError):
    """Request payload drift at the ingress boundary."""
