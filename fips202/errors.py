class Fips202Error(Exception):
    """Base class for errors raised by fips202."""


class InvalidParameterError(Fips202Error, ValueError):
    """A caller passed a parameter the construction cannot accept.

    This is always a bug in the caller (wrong buffer size, bad rate, output
    length that does not match the variant), never a property of hashed data.
    """

    def __init__(self, parameter: str, reason: str):
        self.parameter = parameter
        self.reason = reason
        super().__init__(f"invalid {parameter}: {reason}")
