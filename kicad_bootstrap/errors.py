"""Exceptions raised by the fatal setup steps."""


# ----------------------------------------------------------------
# Custom Exceptions
# ----------------------------------------------------------------
class BootstrapError(Exception):
    """Base exception for fatal bootstrap errors."""

    pass


class PrivilegeError(BootstrapError):
    """Raised when the script runs with the wrong privilege level."""

    pass


class DependencyError(BootstrapError):
    """Raised when a required system tool is missing."""

    pass


class NetworkError(BootstrapError):
    """Raised when the connectivity probe fails."""

    pass


class RepositoryError(BootstrapError):
    """Raised when the package repository cannot be registered."""

    pass


class UpdateError(BootstrapError):
    """Raised when the package index refresh fails."""

    pass
