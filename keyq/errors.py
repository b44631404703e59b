class KeyqError(Exception):
    """base class for all errors raised by keyq."""
    pass


class InvalidArgumentError(KeyqError, ValueError):
    """a required argument (sequence, selector or hashed object) is None."""

    def __init__(self, name: str):
        super().__init__(f"argument '{name}' must not be None")
        self.name = name


class InvalidCastError(KeyqError, TypeError):
    """an untyped comparison received a value that is not of the comparer's element type."""

    def __init__(self, value, expected: type):
        super().__init__(f"cannot cast {type(value).__name__} to {expected.__name__}")
        self.value = value
        self.expected = expected
