"""Passphrase validation: no two words may be anagrams of each other."""


def is_valid(phrase: str) -> bool:
    """True when no word in ``phrase`` is an anagram of an earlier one."""
    seen = set()
    for word in phrase.split():
        key = "".join(sorted(word))
        if key in seen:
            return False
        seen.add(key)
    return True


def count_valid(text: str) -> int:
    """Number of valid passphrases among the non-blank lines of ``text``."""
    return sum(is_valid(line) for line in text.splitlines() if line.strip())