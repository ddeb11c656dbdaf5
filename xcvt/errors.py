"""Exceptions raised by the conversion engine and the CLI.

All of them derive from ``ValueError`` so callers that only care about
"bad input" can keep catching that.
"""


class ConversionError(ValueError):
    """Base class for every user-facing conversion failure."""


class UnknownUnit(ConversionError):
    """A unit key is not present in the registry it was looked up in."""

    def __init__(self, unit: str, category: str | None = None):
        self.unit = unit
        self.category = category
        if category:
            message = f"Unknown {category} unit: {unit}"
        else:
            message = f"Unknown unit: {unit}"
        super().__init__(message)


class UnknownCategory(ConversionError):
    """At least one side of a conversion could not be classified."""

    def __init__(self, message: str = "Category unknown"):
        super().__init__(message)


class IncompatibleCategories(ConversionError):
    """Both units are known but measure different quantities."""

    def __init__(self, message: str = "Incompatible categories"):
        super().__init__(message)


class InvalidArgument(ConversionError):
    pass


class MissingArguments(ConversionError):
    def __init__(self, message: str = "Missing required arguments"):
        super().__init__(message)


class MissingFlagValue(ConversionError):
    pass
