from __future__ import annotations

import unicodedata

"""Hungarian collation key for the table's secondary sort.

Rows on the same floor are ordered by their first visible column ("Lakás")
the way a hu-HU browser compares strings:

- primary: Hungarian alphabet, where the digraphs (cs, dz, dzs, gy, ly, ny,
  sz, ty, zs) are letters of their own and ö/ü follow o/u; whitespace and
  punctuation sort before digits, digits before letters; digits compare
  one by one (no numeric ordering, so "A10" < "A2")
- secondary: unaccented before accented (a < á)
- tertiary: lowercase before uppercase; a doubled digraph ("ssz" = sz+sz,
  "ggy" = gy+gy) expands to two letters and sorts after the spelled-out
  form ("szsz" < "ssz")
"""

__all__ = [
    "hu_sort_key",
]

_ALPHABET = (
    "a", "b", "c", "cs", "d", "dz", "dzs", "e", "f", "g", "gy", "h", "i", "j",
    "k", "l", "ly", "m", "n", "ny", "o", "ö", "p", "q", "r", "s", "sz", "t",
    "ty", "u", "ü", "v", "w", "x", "y", "z", "zs",
)
_RANK = {letter: i for i, letter in enumerate(_ALPHABET)}
_DIGRAPHS = {letter for letter in _ALPHABET if len(letter) > 1}
# "ssz" is sz+sz, "ddzs" is dzs+dzs
_DOUBLED = {d[0] + d for d in _DIGRAPHS}
_ACCENTED = {"á": "a", "é": "e", "í": "i", "ó": "o", "ő": "ö", "ú": "u", "ű": "ü"}

_CLASS_SPACE, _CLASS_DIGIT, _CLASS_LETTER, _CLASS_OTHER = range(4)


def _tokens(text: str) -> list[tuple[str, bool]]:
    """Split into collation letters; the flag marks the first half of a doubled digraph."""
    out: list[tuple[str, bool]] = []
    i = 0
    while i < len(text):
        for size in (4, 3):
            chunk = text[i:i + size]
            if len(chunk) == size and chunk.lower() in _DOUBLED:
                out.append((chunk[0] + chunk[2:], True))
                out.append((chunk[1:], False))
                i += size
                break
        else:
            for size in (3, 2):
                chunk = text[i:i + size]
                if len(chunk) == size and chunk.lower() in _DIGRAPHS:
                    out.append((chunk, False))
                    i += size
                    break
            else:
                out.append((text[i], False))
                i += 1
    return out


def _weights(token: str) -> tuple[tuple[int, int], int]:
    folded = token.lower()
    if folded in _RANK:
        return (_CLASS_LETTER, _RANK[folded]), 0
    if folded in _ACCENTED:
        return (_CLASS_LETTER, _RANK[_ACCENTED[folded]]), 1
    if folded.isdigit():
        return (_CLASS_DIGIT, ord(folded)), 0
    if folded.isalpha():
        base = "".join(c for c in unicodedata.normalize("NFKD", folded) if not unicodedata.combining(c))
        if base in _RANK:
            return (_CLASS_LETTER, _RANK[base]), 1
        return (_CLASS_OTHER, ord(base[:1] or folded)), 0
    return (_CLASS_SPACE, ord(folded)), 0


def hu_sort_key(text: str) -> tuple[tuple[tuple[int, int], ...], tuple[int, ...], tuple[int, ...]]:
    primary: list[tuple[int, int]] = []
    secondary: list[int] = []
    tertiary: list[int] = []
    for token, doubled in _tokens(text):
        weight, accent = _weights(token)
        primary.append(weight)
        secondary.append(accent)
        case = 1 if any(c.isupper() for c in token) else 0
        tertiary.append(case + 2 if doubled else case)
    return tuple(primary), tuple(secondary), tuple(tertiary)
