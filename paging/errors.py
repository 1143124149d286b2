"""
Custom exceptions for the paging helpers.

Invalid caller input and broken configuration are reported with
structured error types. Recoverable request problems (a bad page
number in the query string) never raise; they fall back to page 1.
"""


class PagingError(Exception):
    """Base exception for paging-related errors."""
    pass


class InvalidInputError(PagingError):
    """
    Raised when a caller supplies a value the pager cannot use.

    Attributes:
        field: Name of the offending value (e.g. 'total_results')
        value: The rejected value
        message: User-friendly error message
    """

    def __init__(self, field: str, value=None, message: str = None):
        self.field = field
        self.value = value

        if message is None:
            message = f"Invalid value for {field}: {value!r} (must be a non-negative integer)"

        self.message = message
        super().__init__(message)


class InvalidConfigurationError(PagingError):
    """
    Raised when the pager is configured with values that would make the
    page arithmetic meaningless, such as a page size of zero.

    Attributes:
        setting: Name of the setting
        value: The rejected value
        message: User-friendly error message
    """

    def __init__(self, setting: str, value=None, message: str = None):
        self.setting = setting
        self.value = value

        if message is None:
            message = f"Invalid paging configuration: {setting}={value!r}"

        self.message = message
        super().__init__(message)


class ConfigurationError(PagingError):
    """
    Raised when a paging bar is requested for a calculator that was never
    created for the current request.

    Attributes:
        calculator_id: The id that could not be resolved
        message: User-friendly error message
    """

    def __init__(self, calculator_id: str = None, message: str = None):
        self.calculator_id = calculator_id

        if message is None:
            bad_id = "<undefined>" if calculator_id is None else calculator_id
            message = f"No paging calculator with specified id '{bad_id}'"

        self.message = message
        super().__init__(message)
