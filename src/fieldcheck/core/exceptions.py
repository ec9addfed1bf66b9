"""
Custom exceptions for the field validation library.

Validation failures caused by the data under test are never raised; they are
returned as error messages. The exceptions below signal programmer errors:
broken preconditions, malformed schemas and rejected schema definitions.
"""


class FieldcheckError(Exception):
    """
    Base class for all errors raised by fieldcheck.

    Catching this type catches every library-specific failure while leaving
    unrelated exceptions untouched.
    """


class FieldAssertionError(FieldcheckError, AssertionError):
    """
    Raised when an internal or caller precondition does not hold.

    This exception is raised by ``assert_that`` and is never caught inside the
    library. It subclasses ``AssertionError`` so code that already handles
    failed assertions keeps working.

    Examples:
        * Descriptor without a field name reaching the required check
        * Caller invariants checked through ``assert_that``
    """


class SchemaError(FieldcheckError):
    """
    Raised when a schema entry is neither a field descriptor nor a nested schema.

    Examples:
        * ``field("name")`` used without selecting a kind
        * A plain string or number placed in a schema mapping
    """


class SchemaDefinitionError(FieldcheckError):
    """
    Raised when a declarative schema definition is rejected.

    Attributes:
        path (str): Location of the offending entry inside the definition,
            empty when the problem concerns the whole document
    """

    def __init__(self, message: str, path: str = ""):
        super().__init__(message)
        self.path = path

    def __str__(self) -> str:
        """Format schema definition error message."""
        if self.path:
            return f"Schema Definition Error: {super().__str__()} (at {self.path})"
        return f"Schema Definition Error: {super().__str__()}"
