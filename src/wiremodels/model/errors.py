"""Exceptions raised by the model generators."""


class InvalidParameterError(ValueError):
    """A generator was constructed with parameters outside their valid range."""
