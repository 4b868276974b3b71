"""Three-letter upper-case names ("AAA" to "ZZZ") and their dense indices."""

from collections.abc import Iterator

_LETTERS = 26
_COUNT = _LETTERS ** 3


def _check(text: str) -> None:
    if len(text) != 3 or not all("A" <= c <= "Z" for c in text):
        raise ValueError(f"not a three-letter upper-case name: {text!r}")


def triplet_hash(text: str) -> int:
    """Index of the name in base 26, with 'AAA' as 0."""
    _check(text)
    value = 0
    for char in text:
        value = value * _LETTERS + ord(char) - ord("A")
    return value


def _from_index(index: int) -> str:
    letters = []
    for _ in range(3):
        index, digit = divmod(index, _LETTERS)
        letters.append(chr(ord("A") + digit))
    return "".join(reversed(letters))


def next_triplet(text: str) -> str:
    """The name following ``text``; raises OverflowError after 'ZZZ'."""
    index = triplet_hash(text) + 1
    if index >= _COUNT:
        raise OverflowError("no name follows 'ZZZ'")
    return _from_index(index)


def all_triplets() -> Iterator[str]:
    """Every name from 'AAA' to 'ZZZ' in order."""
    return (_from_index(index) for index in range(_COUNT))