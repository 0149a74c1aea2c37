"""Error kinds for pt-manager."""


class ValidationError(ValueError):
    """A record is missing a required field or carries an invalid value."""


# Display value for a customer id that does not resolve.
UNKNOWN_CUSTOMER = "Unknown"
