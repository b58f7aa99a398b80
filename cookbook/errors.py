"""
Error Types

Every fallible operation in the cookbook core raises one of these.
Each error carries an optional entity/field path (for example
``steps[2].ingredients[0].Mass.unit``) so callers can report exactly
which part of a document was rejected.
"""


class CookbookError(Exception):
    """Base class for all cookbook errors."""

    def __init__(self, message, path=None):
        super().__init__(message)
        self.message = message
        self.path = path

    def located(self, prefix):
        """Prepend an entity path to this error and return it for re-raising."""
        if not prefix:
            return self
        if not self.path:
            self.path = prefix
        elif self.path.startswith('['):
            self.path = f"{prefix}{self.path}"
        else:
            self.path = f"{prefix}.{self.path}"
        return self

    def in_file(self, name):
        """Prepend the file the error was found in, e.g. ``bread.toml:steps[0]``."""
        self.path = f"{name}:{self.path}" if self.path else str(name)
        return self

    def __str__(self):
        if self.path:
            return f"{self.path}: {self.message}"
        return self.message


class MalformedRational(CookbookError):
    """Raised for non-integer or zero-denominator rational input."""
    pass


class DivisionByZero(MalformedRational, ZeroDivisionError):
    """Raised when a rational is divided by zero."""
    pass


class UnknownUnit(CookbookError):
    """Raised when a unit abbreviation is not in the catalog."""
    pass


class CategoryMismatch(CookbookError):
    """Raised when an operation mixes incompatible unit categories."""
    pass


class ValidationError(CookbookError):
    """Raised when a document invariant would be violated."""
    pass


class ParseError(CookbookError):
    """Raised when an input document is structurally malformed."""
    pass


class ArithmeticOverflow(CookbookError):
    """Raised when a rational no longer fits the fixed-width 64-bit form."""
    pass
