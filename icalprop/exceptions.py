"""Exceptions for icalprop library."""


class CalendarError(Exception):
    """Base exception for all icalprop errors."""


class CalendarParseError(CalendarError):
    """Exception raised when parsing a property value.

    The 'message' attribute contains a human-readable message about the
    error that occurred. The 'detailed_error' attribute can provide additional
    information about the error, such as the offending value, useful for
    debugging purposes.
    """

    def __init__(self, message: str, *, detailed_error: str | None = None) -> None:
        """Initialize the CalendarParseError with a message."""
        super().__init__(message)
        self.message = message
        self.detailed_error = detailed_error


class TemporalFormatError(CalendarParseError):
    """Exception raised when a value is not a valid DATE or DATE-TIME literal."""


class UnsupportedNameError(CalendarError, ValueError):
    """Exception raised when no factory can build a property with the name.

    This is only raised for names that are not experimental (X-) names and
    when relaxed parsing is not enabled.
    """

    def __init__(self, name: str) -> None:
        """Initialize UnsupportedNameError."""
        super().__init__(f"Illegal property [{name}]")
        self.name = name


class ReferenceResolutionError(CalendarError):
    """Exception raised when a timezone identifier can't be resolved."""


class PropertyValidationError(CalendarError):
    """Exception raised by an explicit call to validate a property.

    Properties may be constructed in an inconsistent state (e.g. a DATE value
    without a VALUE=DATE parameter) and validation is the step that detects
    this before the property is used.
    """


class ValueParameterCountError(PropertyValidationError):
    """The VALUE parameter appears more than once."""


class TzidParameterCountError(PropertyValidationError):
    """The TZID parameter appears more than once, or at all for a UTC value."""


class DateValueParameterError(PropertyValidationError):
    """A DATE value is missing the VALUE=DATE parameter or declares another type."""


class DateTimeValueParameterError(PropertyValidationError):
    """A DATE-TIME value declares a VALUE parameter other than DATE-TIME."""


class TzidMismatchError(PropertyValidationError):
    """A zoned DATE-TIME value does not match the TZID parameter."""


class UtcRequiredError(PropertyValidationError):
    """A property that only allows UTC values holds a value that is not UTC."""
