"""Domain-specific exceptions"""

from typing import Dict


class DomainException(Exception):
    """Base exception for domain layer, names the offending field and reason"""

    field = "record"

    def __init__(self, message: str, reason: str = "format", field: str | None = None):
        super().__init__(message)
        self.message = message
        self.reason = reason
        if field is not None:
            self.field = field

    def to_detail(self) -> Dict[str, str]:
        """Structured form for the presentation layer"""
        return {"field": self.field, "reason": self.reason, "message": self.message}


class InvalidIban(DomainException):
    """IBAN is malformed or fails the mod-97 check"""

    field = "iban"


class InvalidReference(DomainException):
    """Reference number is malformed or its check digit does not match"""

    field = "reference"


class InvalidAmount(DomainException):
    """Amount is non-numeric, negative, too precise, or too large"""

    field = "amount"


class InvalidDate(DomainException):
    """Due date is not a valid calendar date"""

    field = "due_date"


class EncodingError(DomainException):
    """A normalized field does not fit its fixed record width"""

    pass


class DecodingError(DomainException):
    """Record does not match the fixed layout of any known version"""

    pass
