"""Exception hierarchy for ENR identity keys."""

from __future__ import annotations

from collections.abc import Sequence


class EnrKeyError(Exception):
    """
    Base exception for all key-related errors.

    Attributes:
        message: Human-readable error description.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r})"


class InvalidKeyEncoding(EnrKeyError):
    """
    Raised when raw secret or public key bytes do not decode for a scheme.

    Attributes:
        scheme: Name of the scheme the bytes were decoded for.
        detail: What was wrong with the encoding.
    """

    def __init__(self, scheme: str, detail: str) -> None:
        self.scheme = str(scheme)
        self.detail = detail
        super().__init__(f"Invalid {self.scheme} key encoding: {detail}")


class SignatureFailure(EnrKeyError):
    """
    Raised when the underlying primitive rejects a signing request.

    Attributes:
        scheme: Name of the scheme that failed to sign.
        detail: Reason reported by the primitive.
    """

    def __init__(self, scheme: str, detail: str) -> None:
        self.scheme = str(scheme)
        self.detail = detail
        super().__init__(f"{self.scheme} signing failed: {detail}")


class NoRecognizedScheme(EnrKeyError):
    """
    Raised when no reserved public key field of a record parses.

    Attributes:
        fields: Reserved field names that were tried, in order.
    """

    def __init__(self, fields: Sequence[str]) -> None:
        self.fields = tuple(fields)
        super().__init__(
            f"Record contains no parseable public key (tried: {', '.join(self.fields)})"
        )
