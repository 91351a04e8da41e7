# analytics/exceptions.py


class EntryValidationError(ValueError):
    """Raised when a record handed to the engine breaks its input contract"""

    def __init__(self, message, field=None):
        super().__init__(message)
        self.message = message
        self.field = field

    def as_dict(self):
        detail = {"error": self.message}
        if self.field:
            detail["field"] = self.field
        return detail
