"""Cash card domain specific exceptions."""


class CardError(Exception):
    """Base class for cash card domain errors."""


class CardNotFoundError(CardError):
    """Raised by the store when an update targets an id that does not exist."""


class CardStoreError(CardError):
    """Raised when the backing store fails (connection lost, bad schema, ...)."""


class CardValidationError(CardError):
    """Base class for malformed client input."""


class InvalidAmountError(CardValidationError):
    """Raised when an amount is missing or is not a valid monetary value."""


class InvalidPageRequestError(CardValidationError):
    """Raised for a negative page, a non-positive size or an unknown sort key."""
