# alphabet.py
# Maps the 50 symbols a dictionary word may contain onto dense indices 0..49.
#  - 42 main Arabic-block letters, U+0621..U+064A, by fixed offset
#  - 6 Persian letters outside that range, the zero-width non-joiner
#    and a plain space (some entries are multi-word expressions), by table

from typing import Dict, Optional

MAIN_LETTER_BASE = 0x0621
NUM_MAIN_LETTERS = 42
ALPHABET_SIZE = 50

# named letters used by the matcher and the verb generator
HAMZA = "ء"
ALEF_MADDA = "آ"        # alef with madda above
ALEF_HAMZA_ABOVE = "أ"
VAV_HAMZA = "ؤ"         # vav with hamza above
ALEF_HAMZA_BELOW = "إ"
YEH_HAMZA = "ئ"         # yeh with hamza above
ALEF = "ا"
BEH = "ب"
DAL = "د"
MIM = "م"
NOON = "ن"
HEH = "ه"
VAV = "و"
PEH = "پ"
CHEH = "چ"
ZHEH = "ژ"
KEHEH = "ک"
GAF = "گ"
FARSI_YEH = "ی"
ZWNJ = "\u200c"         # zero-width non-joiner
SPACE = " "

EXTRA_SYMBOLS = (PEH, CHEH, ZHEH, KEHEH, GAF, FARSI_YEH, ZWNJ, SPACE)

_EXTRA_INDEX: Dict[str, int] = {
    ch: NUM_MAIN_LETTERS + i for i, ch in enumerate(EXTRA_SYMBOLS)
}


def symbol_to_index(ch: str) -> Optional[int]:
    """Index of a symbol, or None if the character is outside the alphabet."""
    cp = ord(ch)
    if MAIN_LETTER_BASE <= cp < MAIN_LETTER_BASE + NUM_MAIN_LETTERS:
        return cp - MAIN_LETTER_BASE
    return _EXTRA_INDEX.get(ch)


def index_to_symbol(index: int) -> str:
    """Inverse of symbol_to_index."""
    if 0 <= index < NUM_MAIN_LETTERS:
        return chr(MAIN_LETTER_BASE + index)
    if NUM_MAIN_LETTERS <= index < ALPHABET_SIZE:
        return EXTRA_SYMBOLS[index - NUM_MAIN_LETTERS]
    raise ValueError(f"symbol index out of range: {index}")


def is_valid_word(text: str) -> bool:
    """True when every character of text belongs to the alphabet."""
    return all(symbol_to_index(ch) is not None for ch in text)
