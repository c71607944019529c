"""Image viewer exceptions."""

from enum import Enum


class ErrorKind(Enum):
    NOT_INITIALIZED = "not_initialized"
    DIALOG_ERROR = "dialog_error"
    NO_SELECTION = "no_selection"
    INVALID_ARGUMENT = "invalid_argument"
    ACCESS_ERROR = "access_error"
    NOT_A_DIRECTORY = "not_a_directory"
    READ_ERROR = "read_error"
    NO_IMAGES_FOUND = "no_images_found"


class ViewerError(Exception):
    """Base exception for the viewer service.

    Carries a ``kind`` to match on and the optional underlying ``cause``,
    which is also chained as ``__cause__``.
    """

    kind: ErrorKind

    def __init__(self, message: str, cause: BaseException | None = None):
        super().__init__(message)
        self.message = message
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        if self.cause is not None:
            return f"{self.message}: {self.cause}"
        return self.message


class NotInitializedError(ViewerError):
    """Service used before a host context was attached."""

    kind = ErrorKind.NOT_INITIALIZED


class DialogError(ViewerError):
    """The native directory dialog failed."""

    kind = ErrorKind.DIALOG_ERROR


class NoSelectionError(ViewerError):
    """The user closed the dialog without choosing a directory."""

    kind = ErrorKind.NO_SELECTION


class InvalidArgumentError(ViewerError):
    kind = ErrorKind.INVALID_ARGUMENT


class AccessError(ViewerError):
    """The path could not be inspected."""

    kind = ErrorKind.ACCESS_ERROR


class NotADirectoryPathError(ViewerError):
    kind = ErrorKind.NOT_A_DIRECTORY


class ReadError(ViewerError):
    """Directory contents could not be enumerated."""

    kind = ErrorKind.READ_ERROR


class NoImagesFound(ViewerError):
    kind = ErrorKind.NO_IMAGES_FOUND
