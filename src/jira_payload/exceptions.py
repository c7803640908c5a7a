"""Exceptions raised while building Jira issue payloads."""


class PayloadValidationError(ValueError):
    """Raised when a setter, merge or builder receives empty or absent input.

    Every failure in payload construction is caller-correctable: the
    collection or issue involved is left exactly as it was before the call,
    so the same objects can be reused for a corrected retry.
    """

    def __init__(self, message: str, field_id: str | None = None) -> None:
        super().__init__(message)
        self.field_id = field_id


class FieldCollisionError(PayloadValidationError):
    """Raised when a custom field id clashes with a field already in the payload."""


class CustomFieldParseError(PayloadValidationError):
    """Raised when a custom field value cannot be read from a Jira response."""
