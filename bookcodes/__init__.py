import os

from bookcodes.codes import Parsed, check10, check13, parse_digits, sanitize
from bookcodes.errors import ChecksumError, ConversionError, InvalidCharacterError, InvalidCode, LengthError, PrefixError
from bookcodes.formats import FORMATS, isbn10, isbn13, sbn, to_format, urn

DEFAULT_FORMAT = os.getenv("BOOKCODES_FORMAT", "isbn13")
LOG_LEVEL = os.getenv("BOOKCODES_LOG_LEVEL", "WARNING")


def parse(text):
    """Validate a code and return it as an ISBN-13."""

    return isbn13(parse_digits(text))


def to_isbn10(text):
    return isbn10(parse_digits(text))


def to_isbn13(text):
    return isbn13(parse_digits(text))


def to_sbn(text):
    return sbn(parse_digits(text))


def to_urn(text):
    return urn(parse_digits(text))


def validate(text):
    try:
        parse_digits(text)
    except InvalidCode:
        return False
    return True


def convert(text, name):
    return to_format(parse_digits(text), name)
