"""
Custom exceptions for key recovery operations.

This module defines the exception hierarchy raised by the crypto core:
format errors for wrongly sized buffers, key material errors for
inconsistent or unrecoverable RSA keys, and crypto operation errors for
failures inside the underlying cipher or padding checks.
"""
from typing import Optional


class TicketKeysError(Exception):
    """Base exception for all ticketkeys errors."""

    def __init__(self, message: str, error_code: Optional[int] = None) -> None:
        """
        Initialize the exception.

        Args:
            message: Error message
            error_code: Numeric error code (if available)
        """
        self.message = message
        self.error_code = error_code
        super().__init__(message)


class FormatError(TicketKeysError):
    """Exception raised for wrongly sized buffers or malformed blobs."""
    pass


class InvalidKeyLength(FormatError):
    """Exception raised when a symmetric key is not 16 bytes."""
    pass


class InvalidBlockAlignment(FormatError):
    """Exception raised when data is not a multiple of the block size."""
    pass


class InvalidBlobSize(FormatError):
    """Exception raised when an encrypted key blob has the wrong length."""

    def __init__(self, message: str, expected: int, actual: int) -> None:
        """
        Initialize the exception.

        Args:
            message: Error message
            expected: Expected blob length in bytes
            actual: Length that was supplied
        """
        self.expected = expected
        self.actual = actual
        super().__init__(message)


class InvalidBlockSize(FormatError):
    """Exception raised when an RSA block does not match the modulus size."""
    pass


class ValueTooLarge(FormatError):
    """Exception raised when an integer does not fit a fixed-width buffer."""
    pass


class KeyMaterialError(TicketKeysError):
    """Exception raised for inconsistent or unusable RSA key material."""
    pass


class InvalidKeyMaterial(KeyMaterialError):
    """Exception raised when (n, e, d) cannot describe an RSA key."""
    pass


class FactorizationFailed(KeyMaterialError):
    """Exception raised when no witness exposed a factor of the modulus."""

    def __init__(self, message: str, attempts: int, draws: int) -> None:
        """
        Initialize the exception.

        Args:
            message: Error message
            attempts: Witnesses counted against the attempt bound
            draws: Total witnesses drawn, including uninformative ones
        """
        self.attempts = attempts
        self.draws = draws
        super().__init__(message)


class KeyVerificationFailed(KeyMaterialError):
    """Exception raised when a recovered key pair fails its round trip."""
    pass


class CryptoOperationError(TicketKeysError):
    """Exception raised when an underlying cipher operation fails."""
    pass


class DecryptionFailed(CryptoOperationError):
    """Exception raised when RSA decryption or padding validation fails."""
    pass
