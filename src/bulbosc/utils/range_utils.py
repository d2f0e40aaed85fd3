"""Linear remapping of values between numeric ranges."""


def translate(value: float, prev_start: float, prev_end: float, new_start: float, new_end: float) -> float:
    """Map `value` from the interval [prev_start, prev_end] onto [new_start, new_end].

    Values outside the source interval are not clamped and map outside the target interval.

    Args:
        value: The value to translate.
        prev_start: Start of the source interval.
        prev_end: End of the source interval, must differ from `prev_start`.
        new_start: Start of the target interval.
        new_end: End of the target interval.

    Returns:
        The translated value.

    Raises:
        ZeroDivisionError: If the source interval has zero span.
    """
    prev_span = prev_end - prev_start
    new_span = new_end - new_start
    scaled = (value - prev_start) / prev_span
    return new_start + (scaled * new_span)
