from bookcodes.errors import ChecksumError, InvalidCharacterError, LengthError, PrefixError

from dataclasses import dataclass
from itertools import cycle

import logging

logger = logging.getLogger(__name__)

URN_PREFIX = "urn:isbn:"

# 13 digits and 4 hyphens
MAX_LENGTH = 13 + 4

X = 10

ISBN10_GS1 = (9, 7, 8)
GS1_PREFIXES = [ISBN10_GS1, (9, 7, 9)]

DIGITS = {c: i for i, c in enumerate("0123456789")}
DIGITS["X"] = X
DIGITS["x"] = X


@dataclass(frozen=True)
class Parsed:
    """A valid book code in canonical ISBN-13 form.

    Every SBN and ISBN-10 has an ISBN-13 equivalent, so that is all we
    store: 13 values in the range 0-9, starting with a GS1 prefix, and
    ending with the ISBN-13 check digit.  Construction fails rather than
    producing an instance which breaks any of that.
    """

    digits: tuple

    def __post_init__(self):
        digits = tuple(self.digits)
        object.__setattr__(self, "digits", digits)

        if len(digits) != 13:
            raise LengthError(len(digits))
        if digits[:3] not in GS1_PREFIXES:
            raise PrefixError(to_string(digits[:3]))
        for position, d in enumerate(digits):
            if d == X:
                raise InvalidCharacterError("isbn-13", position)
            if d not in range(10):
                raise ValueError(f"isbn: not a digit value: {d!r}")
        expected = check13(digits)
        if expected != digits[12]:
            raise ChecksumError("isbn-13", expected, digits[12])

    @property
    def prefix(self):
        return to_string(self.digits[:3])

    @property
    def group_digit(self):
        """The first digit of the registration group."""

        return self.digits[3]

    def __str__(self):
        return to_string(self.digits)


def to_string(digits):
    return "".join(str(d) for d in digits)


def weight_sum(digits, weights):
    return sum(d * w for d, w in zip(digits, cycle(weights)))


def check10(digits):
    """Compute the base-11 check digit of an ISBN-10 or SBN.

    Only the first nine values are used, so the code can be passed with or
    without its current check digit.  A result of 10 is written as 'X'.
    """

    if len(digits) < 9:
        raise ValueError(f"isbn: check10 needs 9 digits, got {len(digits)}")
    return (11 - weight_sum(digits[:9], range(10, 1, -1)) % 11) % 11


def check13(digits):
    """Compute the base-10 check digit of an ISBN-13.

    Only the first twelve values are used, so the code can be passed with
    or without its current check digit.
    """

    if len(digits) < 12:
        raise ValueError(f"isbn: check13 needs 12 digits, got {len(digits)}")
    return (10 - weight_sum(digits[:12], [1, 3]) % 10) % 10


def sanitize(text):
    """Turn free-form text into a tuple of digit values.

    A leading 'urn:isbn:' is removed, then every character which is not a
    digit or 'X' is dropped.
    """

    if not isinstance(text, str):
        raise TypeError(f"isbn: expected a string, got {type(text).__name__}")

    if text.lower().startswith(URN_PREFIX):
        text = text[len(URN_PREFIX):]

    if len(text) > MAX_LENGTH:
        raise LengthError(len(text), "isbn: parse error: too long")

    return tuple(DIGITS[c] for c in text if c in DIGITS)


def parse_digits(text):
    digits = sanitize(text)

    try:
        if len(digits) == 9:
            logger.debug("parsing %r as an SBN", text)
            return parse_sbn(digits)
        elif len(digits) == 10:
            logger.debug("parsing %r as an ISBN-10", text)
            return parse10(digits)
        elif len(digits) == 13:
            logger.debug("parsing %r as an ISBN-13", text)
            return parse13(digits)
    except ValueError as e:
        logger.debug("rejected %r: %s", text, e)
        raise

    logger.debug("rejected %r: %d digits", text, len(digits))
    raise LengthError(len(digits))


def reject_inner_x(digits, kind):
    for position, d in enumerate(digits[:-1]):
        if d == X:
            raise InvalidCharacterError(kind, position)


def parse_sbn(digits):
    # an SBN is an ISBN-10 in registration group 0, with the 0 left off
    reject_inner_x(digits, "sbn")
    return parse10((0,) + tuple(digits), kind="sbn")


def parse10(digits, kind="isbn-10"):
    digits = tuple(digits)
    reject_inner_x(digits, kind)

    expected = check10(digits)
    if expected != digits[9]:
        raise ChecksumError(kind, expected, digits[9])

    # the ISBN-10 check digit is base 11, so it can't be reused here
    body = ISBN10_GS1 + digits[:9]
    return Parsed(body + (check13(body),))


def parse13(digits):
    # currently this only checks the format, not whether the number has
    # actually been allocated by the ISBN agency
    return Parsed(digits)
