class PlateError(ValueError):
    pass


class InvalidArgument(PlateError):
    """Raised for a negative or non-integer index, or a bad factory setup."""


class OutOfRange(PlateError):
    """Raised when an index lies past the last plate of the sequence."""


class InvalidPlate(PlateError):
    """Raised when a string is not a well-formed plate."""
