"""
Tire size code decoding.

Reads metric tire size codes such as "275/55R20" (width in mm, aspect ratio
in percent, wheel diameter in inches). Any run of two or more digits is a
numeric group; every other character is a separator. The first three groups
are taken in order as width, aspect ratio and wheel diameter, so
"P275/55 R20", "275-55-20" and "LT275/55R20 112T" all decode the same way.
"""

import logging

logger = logging.getLogger(__name__)

ASCII_DIGITS = "0123456789"

# A numeric group needs at least this many consecutive digits
MIN_GROUP_LENGTH = 2


class ParseError(ValueError):
    """A tire size code could not be decoded."""

    def __init__(self, code: str, reason: str):
        self.code = code
        self.reason = reason
        super().__init__(f"Invalid tire size code {code!r}: {reason}")


def scan_digit_runs(text: str, min_length: int = MIN_GROUP_LENGTH) -> list[str]:
    """
    Return the maximal runs of ASCII digits in text, left to right.

    Runs shorter than min_length are skipped. Non-ASCII digits
    (e.g. Arabic-Indic numerals) count as separators.
    """
    runs = []
    current = []
    for ch in text:
        if ch in ASCII_DIGITS:
            current.append(ch)
            continue
        if len(current) >= min_length:
            runs.append("".join(current))
        current = []
    if len(current) >= min_length:
        runs.append("".join(current))
    return runs


def split_tire_code(code: str) -> tuple[int, int, int]:
    """
    Decode a tire size code into its numeric groups.

    Args:
        code: Tire size code, e.g. "275/55R20"

    Returns:
        Tuple of (width_mm, aspect_ratio_percent, wheel_diameter_in)

    Raises:
        ParseError: If fewer than three numeric groups are found
    """
    runs = scan_digit_runs(code)
    if len(runs) < 3:
        logger.debug("Rejected tire code %r: found %d numeric group(s)", code, len(runs))
        raise ParseError(code, f"expected 3 numeric groups, found {len(runs)}")

    try:
        width, aspect_ratio, wheel_diameter = (int(run) for run in runs[:3])
    except ValueError as e:
        raise ParseError(code, "numeric group is too long") from e
    logger.debug(
        "Decoded tire code %r: width=%dmm aspect=%d%% wheel=%din",
        code, width, aspect_ratio, wheel_diameter,
    )
    return width, aspect_ratio, wheel_diameter
