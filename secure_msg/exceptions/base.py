"""Base exception classes for SecureMSG."""


class SecureMsgException(Exception):
    """Base exception for all SecureMSG errors.

    All custom exceptions in the secure_msg package should inherit
    from this base class for consistent error handling.
    """

    pass
