class InvalidCode(ValueError):
    """Base class for every rejected book code."""


class LengthError(InvalidCode):
    def __init__(self, length, message=None):
        self.length = length
        super().__init__(message or f"isbn: parse: invalid length {length}")


class PrefixError(InvalidCode):
    def __init__(self, prefix):
        self.prefix = prefix
        super().__init__(f"isbn: invalid isbn-13 gs1 {prefix}")


class ChecksumError(InvalidCode):
    def __init__(self, kind, expected, actual):
        self.kind = kind
        self.expected = expected
        self.actual = actual
        super().__init__(f"isbn: invalid {kind} checksum")


class InvalidCharacterError(InvalidCode):
    def __init__(self, kind, position):
        self.kind = kind
        self.position = position
        super().__init__(f"isbn: {kind}: 'X' is only allowed as the check digit (found at position {position})")


class ConversionError(InvalidCode):
    """The code is valid, but has no representation in the target format."""

    def __init__(self, target, reason):
        self.target = target
        self.reason = reason
        super().__init__(f"isbn: {target}: {reason}")
