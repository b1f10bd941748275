"""String helpers for the shell: word splitting, number parsing and formatting."""

from __future__ import annotations

import re

INT_MAX = 2**31 - 1
_UINT32 = 0xFFFFFFFF
_ULONG = 2**64 - 1
_UPPER_DIGITS = "0123456789ABCDEF"
_LOWER_DIGITS = "0123456789abcdef"


def split_words(text, delimiters=" "):
    """Split ``text`` on any character of ``delimiters``, ignoring repeats.

    Returns an empty list when the text holds no words.
    """
    if not delimiters:
        delimiters = " "
    pattern = "[" + "".join(re.escape(ch) for ch in delimiters) + "]+"
    return [word for word in re.split(pattern, text) if word]


def starts_with(text, prefix):
    """Return what follows ``prefix`` in ``text``, or None if it does not start with it."""
    if text.startswith(prefix):
        return text[len(prefix):]
    return None


def loose_atoi(text):
    """Read the first run of digits in ``text`` as a signed 32-bit integer.

    Every '-' seen up to the end of the digit run flips the sign; anything
    else that is not a digit is skipped. Text without digits gives 0.
    """
    sign = 1
    result = 0
    seen_digit = False
    for ch in text:
        if ch == "-":
            sign = -sign
        if "0" <= ch <= "9":
            seen_digit = True
            result = (result * 10 + ord(ch) - ord("0")) & _UINT32
        elif seen_digit:
            break
    value = (-result if sign < 0 else result) & _UINT32
    return value - 2**32 if value > INT_MAX else value


def parse_status(text):
    """Parse an exit status: optional '+', then digits only, at most INT_MAX.

    Raises ValueError for anything else.
    """
    digits = text[1:] if text.startswith("+") else text
    result = 0
    for ch in digits:
        if not "0" <= ch <= "9":
            raise ValueError(f"Illegal number: {text}")
        result = result * 10 + ord(ch) - ord("0")
        if result > INT_MAX:
            raise ValueError(f"Illegal number: {text}")
    return result


def format_number(num, base=10, lowercase=False, unsigned=False):
    """Render ``num`` in ``base`` (2 to 16).

    Negative numbers get a leading '-' unless ``unsigned`` is set, in which
    case they are shown as their 64-bit two's complement value.
    """
    if not 2 <= base <= 16:
        raise ValueError(f"unsupported base: {base}")
    digits = _LOWER_DIGITS if lowercase else _UPPER_DIGITS
    sign = ""
    if num < 0:
        if unsigned:
            n = num & _ULONG
        else:
            n = -num
            sign = "-"
    else:
        n = num
    out = []
    while True:
        n, rem = divmod(n, base)
        out.append(digits[rem])
        if n == 0:
            break
    return sign + "".join(reversed(out))


def remove_comments(line):
    """Cut ``line`` at the first '#' that starts the line or follows a space."""
    for index, ch in enumerate(line):
        if ch == "#" and (index == 0 or line[index - 1] == " "):
            return line[:index]
    return line