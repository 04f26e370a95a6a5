"""String operations: reversal, palindrome and anagram checks, smallest words."""

from __future__ import annotations

from collections import Counter

from ._guards import require_text


def reverse_string(text: str) -> str:
    """Return *text* reversed, built by scanning from the last index down to the first.

    Example:
        >>> reverse_string("Kotlin")
        'niltoK'
    """
    value = require_text(text)
    return "".join(value[index] for index in range(len(value) - 1, -1, -1))


def is_self_reverse(text: str) -> bool:
    """Return True when *text* equals its own reversal, character for character.

    No case folding and no filtering; see :func:`is_palindrome` for the
    normalised check and :func:`are_anagrams` for comparing two strings.

    Example:
        >>> is_self_reverse("racecar")
        True
        >>> is_self_reverse("Racecar")
        False
    """
    value = require_text(text)
    return value == reverse_string(value)


def is_palindrome(text: str) -> bool:
    """Return True when *text* reads the same backwards once normalised.

    Normalisation lowercases and keeps only alphanumeric characters.

    Example:
        >>> is_palindrome("Madam")
        True
        >>> is_palindrome("A man, a plan, a canal: Panama")
        True
        >>> is_palindrome("Hello")
        False
    """
    cleaned = "".join(char for char in require_text(text).lower() if char.isalnum())
    return cleaned == cleaned[::-1]


def are_anagrams(first: str, second: str) -> bool:
    """Return True when both strings use the same characters equally often.

    Lengths are compared as given, before any case folding. Character
    counts are then compared case-insensitively; every other character,
    spaces included, counts.

    Example:
        >>> are_anagrams("listen", "silent")
        True
        >>> are_anagrams("Listen", "Silent")
        True
        >>> are_anagrams("rat", "car")
        False
        >>> are_anagrams("\\u0130", "i\\u0307")
        False
    """
    text_a = require_text(first, name="first")
    text_b = require_text(second, name="second")
    if len(text_a) != len(text_b):
        return False
    return Counter(text_a.lower()) == Counter(text_b.lower())


def smallest_word_first(text: str) -> str:
    """Return the first word of minimal length, splitting on single spaces.

    Consecutive spaces produce empty tokens, and an empty token is the
    shortest possible word.

    Example:
        >>> smallest_word_first("I am word best coder")
        'I'
        >>> smallest_word_first("to be or")
        'to'
    """
    words = require_text(text).split(" ")
    smallest = words[0]
    for word in words:
        if len(word) < len(smallest):
            smallest = word
    return smallest


def smallest_word_last(text: str) -> str:
    """Return the last word of minimal length, ignoring empty tokens.

    Returns ``""`` when *text* holds no words.

    Example:
        >>> smallest_word_last("I am word best coder")
        'I'
        >>> smallest_word_last("to be or")
        'or'
    """
    words = [word for word in require_text(text).split(" ") if word]
    if not words:
        return ""
    smallest = words[0]
    for word in words:
        if len(word) <= len(smallest):
            smallest = word
    return smallest


__all__ = [
    "are_anagrams",
    "is_palindrome",
    "is_self_reverse",
    "reverse_string",
    "smallest_word_first",
    "smallest_word_last",
]
