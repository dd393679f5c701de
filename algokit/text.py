"""String routines: anagrams, word frequency, Morse code, palindromes, vowels."""

from __future__ import annotations

from collections import Counter

_MORSE_ALPHABET = {
    "a": ".-",
    "b": "-...",
    "c": "-.-.",
    "d": "-..",
    "e": ".",
    "f": "..-.",
    "g": "--.",
    "h": "....",
    "i": "..",
    "j": ".---",
    "k": "-.-",
    "l": ".-..",
    "m": "--",
    "n": "-.",
    "o": "---",
    "p": ".--.",
    "q": "--.-",
    "r": ".-.",
    "s": "...",
    "t": "-",
    "u": "..-",
    "v": "...-",
    "w": ".--",
    "x": "-..-",
    "y": "-.--",
    "z": "--..",
    "1": ".----",
    "2": "..---",
    "3": "...--",
    "4": "....-",
    "5": ".....",
    "6": "-....",
    "7": "--...",
    "8": "---..",
    "9": "----.",
    "0": "-----",
}
_MORSE_INVERSE = {code: char for char, code in _MORSE_ALPHABET.items()}
_VOWELS = frozenset("aiueo")


class MorseError(ValueError):
    """Raised for characters or codes outside the Morse alphabet."""


def is_anagram(first: str, second: str) -> bool:
    """Tell whether the two strings consist of the same characters."""
    return sorted(first) == sorted(second)


def top_words(text: str, k: int) -> list[str]:
    """Return the ``k`` most frequent whitespace-separated words of ``text``.

    Words of equal frequency keep the order of their first appearance.
    """
    if k < 0:
        raise ValueError("k must not be negative")
    return [word for word, _ in Counter(text.split()).most_common(k)]


def morse_encode(text: str) -> str:
    """Encode letters and digits as Morse codes separated by spaces."""
    codes = []
    for char in text.lower():
        try:
            codes.append(_MORSE_ALPHABET[char])
        except KeyError:
            raise MorseError(f"unknown char {char}") from None
    return " ".join(codes)


def morse_decode(code: str) -> str:
    """Decode space-separated Morse codes into lower-case text."""
    chars = []
    for symbol in code.split(" "):
        try:
            chars.append(_MORSE_INVERSE[symbol])
        except KeyError:
            raise MorseError(f"unknown code {symbol}") from None
    return "".join(chars)


def is_palindrome(text: str) -> bool:
    """Tell whether ``text`` reads the same backwards."""
    return text == text[::-1]


def count_vowels(text: str) -> int:
    """Count the characters of ``text`` that are a, e, i, o or u in any case."""
    return sum(1 for char in text if char.lower() in _VOWELS)