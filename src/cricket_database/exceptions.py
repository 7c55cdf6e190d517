"""Exceptions raised by the bootstrap steps."""

from typing import Optional


class BootstrapError(Exception):
    """Base exception for bootstrap failures."""
    pass


class DatabaseProvisioningError(BootstrapError):
    """Raised when the target database cannot be checked or created."""
    pass


class SchemaApplicationError(BootstrapError):
    """Raised when the DDL script fails; the transaction has been rolled back."""

    def __init__(self, message: str, statement_index: Optional[int] = None, statement: Optional[str] = None):
        super().__init__(message)
        self.statement_index = statement_index
        self.statement = statement
