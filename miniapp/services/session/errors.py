"""Session errors."""


class SessionError(Exception):
    """Base class for errors raised by the session manager."""


class SessionNotFoundError(SessionError):
    """No session with the given id."""


class ProductNotFoundError(SessionError):
    """Product id is not in the catalog."""


class ProductUnavailableError(SessionError):
    """The product is on the stop list."""


class NoProductSelectedError(SessionError):
    """An option was toggled while no product sheet is open."""


class OptionNotApplicableError(SessionError):
    """The field is not shown for the open product."""


class InvalidOptionError(SessionError):
    """The value is not a choice of the field."""


class AdminRequiredError(SessionError):
    """The action is only available in admin mode."""


class AdminModeError(SessionError):
    """The action is not available in admin mode."""


class InvalidPasswordError(SessionError):
    """Admin password did not match."""
