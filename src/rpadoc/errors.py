"""Exception types raised by the metadata extraction engine."""


class RpaDocError(Exception):
    """Base class for all rpadoc errors."""


class UsageError(RpaDocError, ValueError):
    """A required input to an operation was missing or had the wrong shape."""


class MalformedDocumentError(RpaDocError):
    """The XAML document does not describe a workflow rpadoc can read."""

    def __init__(self, message: str, file_path: str | None = None):
        self.file_path = file_path
        if file_path:
            message = f"{message} ({file_path})"
        super().__init__(message)


class InvalidTypeTokenError(MalformedDocumentError, UsageError):
    """An argument type token such as ``InArgument(x:String)`` could not be decoded."""

    def __init__(self, token: str, file_path: str | None = None):
        self.token = token
        super().__init__(
            f"Argument type '{token}' must have the form Direction(prefix:TypeName)",
            file_path=file_path,
        )


class UnsetFieldError(RpaDocError):
    """A metadata field was read before it was populated."""

    def __init__(self, field_name: str):
        self.field_name = field_name
        super().__init__(f"The {field_name} property has not been set.")
