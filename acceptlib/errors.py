"""Exception types raised by AcceptLib.

A missing handler is never an error. Everything here signals a contract
violation by the composite author or a bad configuration.
"""


class AcceptError(Exception):
    """Base class for all AcceptLib errors."""
    pass


class InvalidDescriptorError(AcceptError, ValueError):
    """Raised when a composite hands the engine a malformed child descriptor.

    Covers non-iterable ``vals``, a missing ``intention``, an intention equal
    to the neutral context, and children without an accept entry point.
    """
    pass


class ConfigurationError(AcceptError):
    """Raised when a DispatchConfig fails validation."""
    pass
