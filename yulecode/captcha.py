"""Sum of digits that match the digit halfway around a circular sequence."""


def halfway_captcha(text: str) -> int:
    """Return the sum of digits equal to the digit halfway around the list.

    Only the first line of ``text`` is read. Any character that is not a
    decimal digit raises ``ValueError``.
    """
    first_line = text.split("\n", 1)[0]
    digits = [int(char) for char in first_line]
    if not digits:
        return 0
    half = len(digits) // 2
    partners = digits[half:] + digits[:half]
    return sum(digit for digit, partner in zip(digits, partners) if digit == partner)