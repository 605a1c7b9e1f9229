"""quadhash error types."""


class QuadHashError(Exception):
    """Base error for all quadhash failures."""


class QuadHashTypeError(QuadHashError, TypeError):
    """Input is neither text nor a bytes-like object."""


class QuadHashDomainError(QuadHashError, ValueError):
    """Argument outside the numeric domain of a helper."""
