# wordlist.py
# Reading and writing dictionary word lists.
# Two on-disk formats:
#  - "text":   UTF-8 (a leading BOM is dropped), one entry per line
#  - "binary": the compact bundle format, a run of records each holding a
#              2-byte big-endian byte count followed by the entry in Java's
#              "modified UTF-8" (NUL as C0 80, astral chars as surrogate pairs)

from __future__ import annotations
import os
import struct
from typing import BinaryIO, Iterable, Iterator, List, Optional

from persian_word_guesser.core.alphabet import is_valid_word
from persian_word_guesser.core.errors import DictionaryLoadError, WordListFormatError
from persian_word_guesser.utils.logger_utils import Log

TEXT = "text"
BINARY = "binary"
FORMATS = (TEXT, BINARY)
TEXT_SUFFIXES = (".txt", ".lst")

_LENGTH = struct.Struct(">H")
MAX_RECORD_BYTES = 0xFFFF


def detect_format(path: str) -> str:
    """Pick the format from the file extension."""
    return TEXT if os.path.splitext(path)[1].lower() in TEXT_SUFFIXES else BINARY


def _resolve(path: str, fmt: Optional[str]) -> str:
    fmt = fmt or detect_format(path)
    if fmt not in FORMATS:
        raise WordListFormatError(f"unknown word list format: {fmt!r}")
    return fmt


# modified UTF-8 ----------------------------------------------------------------
def decode_modified_utf8(raw: bytes) -> str:
    text = raw.replace(b"\xc0\x80", b"\x00").decode("utf-8", "surrogatepass")
    # glue any CESU-8 surrogate pairs back into single code points
    return text.encode("utf-16-le", "surrogatepass").decode("utf-16-le")


def encode_modified_utf8(text: str) -> bytes:
    out = bytearray()
    for ch in text:
        cp = ord(ch)
        if cp == 0:
            out += b"\xc0\x80"
        elif cp > 0xFFFF:
            v = cp - 0x10000
            for unit in (0xD800 + (v >> 10), 0xDC00 + (v & 0x3FF)):
                out += chr(unit).encode("utf-8", "surrogatepass")
        else:
            out += ch.encode("utf-8")
    return bytes(out)


def iter_binary_records(stream: BinaryIO) -> Iterator[str]:
    """Yield entries from a binary word list until a clean end of stream."""
    index = 0
    while True:
        head = stream.read(_LENGTH.size)
        if not head:
            return
        if len(head) < _LENGTH.size:
            raise WordListFormatError(f"truncated length prefix in record {index}")
        (size,) = _LENGTH.unpack(head)
        body = stream.read(size)
        if len(body) < size:
            raise WordListFormatError(
                f"record {index} declares {size} bytes but only {len(body)} remain"
            )
        try:
            yield decode_modified_utf8(body)
        except UnicodeDecodeError as e:
            raise WordListFormatError(f"record {index} is not valid modified UTF-8: {e}") from e
        index += 1


def iter_text_entries(lines: Iterable[str]) -> Iterator[str]:
    for line in lines:
        entry = line.rstrip("\r\n")
        if entry:
            yield entry


# reading/writing ----------------------------------------------------------------
def read_word_list(path: str, fmt: Optional[str] = None) -> List[str]:
    """
    Read every entry of a word list in file order.
    Raises DictionaryLoadError when the file cannot be read and
    WordListFormatError when its contents are malformed.
    """
    fmt = _resolve(path, fmt)
    try:
        if fmt == TEXT:
            with open(path, "r", encoding="utf-8-sig") as fh:
                words = list(iter_text_entries(fh))
        else:
            with open(path, "rb") as fh:
                words = list(iter_binary_records(fh))
    except UnicodeDecodeError as e:
        raise WordListFormatError(f"{path} is not valid UTF-8: {e}") from e
    except OSError as e:
        raise DictionaryLoadError(f"cannot read word list {path}: {e}") from e

    Log.debug(f"[WordList] read {len(words)} entries from {path} ({fmt})")
    return words


def write_word_list(words: Iterable[str], path: str, fmt: Optional[str] = None) -> int:
    """Write entries in order. Returns the number written."""
    fmt = _resolve(path, fmt)
    folder = os.path.dirname(path)
    if folder:
        os.makedirs(folder, exist_ok=True)

    count = 0
    if fmt == TEXT:
        with open(path, "w", encoding="utf-8", newline="\n") as fh:
            for word in words:
                if "\n" in word:
                    raise ValueError(f"entry contains a newline: {word!r}")
                fh.write(word + "\n")
                count += 1
    else:
        with open(path, "wb") as fh:
            for word in words:
                body = encode_modified_utf8(word)
                if len(body) > MAX_RECORD_BYTES:
                    raise ValueError(f"entry too long for a binary record: {len(body)} bytes")
                fh.write(_LENGTH.pack(len(body)))
                fh.write(body)
                count += 1

    Log.info(f"[WordList] wrote {count} entries to {path} ({fmt})")
    return count


def clean_words(words: Iterable[str]) -> List[str]:
    """
    Prepare a raw word list for the dictionary: trim whitespace, drop empty
    entries and entries with characters outside the alphabet. File order
    (and duplicates) are kept, since order is what sets the initial ranks.
    """
    out: List[str] = []
    dropped = 0
    for raw in words:
        word = raw.strip()
        if not word:
            continue
        if not is_valid_word(word):
            dropped += 1
            continue
        out.append(word)
    if dropped:
        Log.info(f"[WordList] dropped {dropped} entries with unsupported characters")
    return out
