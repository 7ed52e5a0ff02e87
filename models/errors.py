"""Exceptions raised at the data boundary (never by the status engine)."""


class MissingFieldError(ValueError):
    """A required field was absent from a create or update request."""

    def __init__(self, fields):
        self.fields = list(fields)
        super().__init__(f"Missing required fields: {', '.join(self.fields)}")


class NotFoundError(LookupError):
    """A pet, vaccination type or record id does not exist."""
