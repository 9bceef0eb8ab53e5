"""Amount in words for receipts (Indian numbering: crore, lakh, thousand)."""

ONES = ["", "One", "Two", "Three", "Four", "Five", "Six", "Seven", "Eight", "Nine",
        "Ten", "Eleven", "Twelve", "Thirteen", "Fourteen", "Fifteen", "Sixteen",
        "Seventeen", "Eighteen", "Nineteen"]
TENS = ["", "", "Twenty", "Thirty", "Forty", "Fifty", "Sixty", "Seventy", "Eighty", "Ninety"]

SCALES = [
    (10000000, "Crore"),
    (100000, "Lakh"),
    (1000, "Thousand"),
    (100, "Hundred"),
]


def _words(num: int) -> list:
    parts = []
    for size, name in SCALES:
        if num >= size:
            parts.extend(_words(num // size))
            parts.append(name)
            num %= size

    if num >= 20:
        parts.append(TENS[num // 10])
        num %= 10
    if num > 0:
        parts.append(ONES[num])
    return parts


def number_to_words(num: int) -> str:
    """
    Convert a whole rupee amount to words.

    >>> number_to_words(5000)
    'Five Thousand Only'
    >>> number_to_words(125050)
    'One Lakh Twenty Five Thousand Fifty Only'
    """
    num = int(num)
    if num == 0:
        return "Zero Only"
    if num < 0:
        return "Minus " + number_to_words(-num)
    return " ".join(_words(num)) + " Only"
