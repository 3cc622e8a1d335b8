class RelaisDevError(Exception):
    """Base class for exceptions in this package."""


class OptionsError(RelaisDevError):
    """Raised when an Options record is misused."""


class UnknownOptionError(OptionsError, AttributeError):
    """Raised when reading or updating a name that an Options record lacks."""


class FixedOptionsError(OptionsError, TypeError):
    """Raised when adding or deleting a name after an Options record is created."""


class AssertionFailure(RelaisDevError, AssertionError):
    """Raised by assert_or_raise when no other error class is given."""
