"""Morse code encoding and decoding."""

from __future__ import annotations

UNKNOWN_CHARACTER = "........"
UNKNOWN_MORSE_CHARACTER = "_"

_TO_MORSE = {
    "A": ".-", "B": "-...", "C": "-.-.", "D": "-..", "E": ".", "F": "..-.",
    "G": "--.", "H": "....", "I": "..", "J": ".---", "K": "-.-", "L": ".-..",
    "M": "--", "N": "-.", "O": "---", "P": ".--.", "Q": "--.-", "R": ".-.",
    "S": "...", "T": "-", "U": "..-", "V": "...-", "W": ".--", "X": "-..-",
    "Y": "-.--", "Z": "--..",
    "1": ".----", "2": "..---", "3": "...--", "4": "....-", "5": ".....",
    "6": "-....", "7": "--...", "8": "---..", "9": "----.", "0": "-----",
    "&": ".-...", "@": ".--.-.", ":": "---...", ",": "--..--", ".": ".-.-.-",
    "'": ".----.", '"': ".-..-.", "?": "..--..", "/": "-..-.", "=": "-...-",
    "+": ".-.-.", "-": "-....-", "(": "-.--.", ")": "-.--.-", " ": "/",
    "!": "-.-.--",
}

_FROM_MORSE = {code: char for char, code in _TO_MORSE.items()}
_FROM_MORSE[""] = ""

_MORSE_SYMBOLS = frozenset(".-/ ")


def encode(message: str) -> str:
    """Encode ``message`` as Morse code, letters separated by spaces and words by ``/``.

    Characters with no Morse code become ``........``.
    """
    return " ".join(_TO_MORSE.get(char.upper(), UNKNOWN_CHARACTER) for char in message)


def decode(code: str) -> str:
    """Decode Morse code into upper-case text.

    Tokens that are not valid Morse letters become ``_``. Raises ValueError if
    ``code`` holds anything besides dots, dashes, spaces and slashes.
    """
    if not set(code) <= _MORSE_SYMBOLS:
        raise ValueError("Invalid morse code")
    return " ".join(
        "".join(_FROM_MORSE.get(token, UNKNOWN_MORSE_CHARACTER) for token in part.split(" "))
        for part in code.split("/")
    )