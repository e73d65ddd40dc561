"""Render a parsed book code in one of its external forms.

Check digits are always recomputed for the target format: ISBN-13 uses a
base-10 check digit, ISBN-10 and SBN a base-11 one.
"""

from bookcodes.codes import ISBN10_GS1, URN_PREFIX, X, check10, check13, to_string
from bookcodes.errors import ConversionError


def render(digits, check):
    if X in digits:
        raise ValueError("isbn: digit value 10 outside of the check digit")
    return to_string(digits) + ("X" if check == X else str(check))


def isbn13(parsed):
    body = parsed.digits[:12]
    return render(body, check13(body))


def isbn10(parsed):
    if parsed.digits[:3] != ISBN10_GS1:
        # only 978 codes were ever issued as ISBN-10s
        raise ConversionError("isbn-10", f"gs1 is not 978 but {parsed.prefix}")
    body = parsed.digits[3:12]
    return render(body, check10(body))


def sbn(parsed):
    if parsed.digits[:3] != ISBN10_GS1:
        raise ConversionError("sbn", f"gs1 is not 978 but {parsed.prefix}")
    if parsed.group_digit != 0:
        # the SBN check digit only matches the ISBN-10 one if the dropped
        # group digit is 0
        raise ConversionError("sbn", f"group is not 0 but {parsed.group_digit}")
    body = parsed.digits[3:12]
    return render(body[1:], check10(body))


def urn(parsed):
    return URN_PREFIX + isbn13(parsed)


FORMATS = {
    "isbn13": isbn13,
    "isbn10": isbn10,
    "sbn": sbn,
    "urn": urn,
}


def to_format(parsed, name):
    try:
        formatter = FORMATS[name]
    except KeyError:
        raise ValueError(f"unknown format {name!r}, expected one of {', '.join(FORMATS)}") from None
    return formatter(parsed)
