"""Converts values to display text. Used by calling code only: the evaluator never serializes anything."""

import math
import unicodedata
from decimal import Decimal

from sheq.pure.value import Boolean, Closure, Primitive, Real, Text

ESCAPES = {
    "\"": "\\\"",
    "\\": "\\\\",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\0": "\\0",
}


def serialize_real(number):
    """Shortest text that round-trips to number, in plain decimal notation: 3.0 -> '3', 1e-07 -> '0.0000001'."""
    if math.isnan(number):
        return "NaN"
    elif math.isinf(number):
        return "inf" if number > 0 else "-inf"

    text = format(Decimal(repr(number)), "f")  # repr is the shortest round-trippable form, maybe in exponent notation
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def serialize_text(text):
    """Quotes text, escaping quotes, backslashes and control characters."""
    chars = []
    for char in text:
        if char in ESCAPES:
            chars.append(ESCAPES[char])
        elif unicodedata.category(char) == "Cc":
            chars.append(f"\\u{{{ord(char):x}}}")
        else:
            chars.append(char)
    return "\"" + "".join(chars) + "\""


def serialize(value):
    """Returns the display text of value. Never raises."""
    if isinstance(value, Real):
        return serialize_real(value.value)
    elif isinstance(value, Boolean):
        return "true" if value.value else "false"
    elif isinstance(value, Text):
        return serialize_text(value.text)
    elif isinstance(value, Closure):
        return "#<procedure>"
    elif isinstance(value, Primitive):
        return "#<primop>"
    return repr(value)
