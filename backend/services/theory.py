import re
from dataclasses import dataclass
from typing import Literal

Notation = Literal["auto", "sharps", "flats"]

# Pitch-class tables: index -> note name, C == 0
SHARP_NOTES = ("C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B")
FLAT_NOTES = ("C", "Db", "D", "Eb", "E", "F", "Gb", "G", "Ab", "A", "Bb", "B")

# Spellings found in neither table, mapped to their table equivalent
ENHARMONIC_ALIASES = {
    "E#": "F",
    "B#": "C",
    "Cb": "B",
    "Fb": "E",
}

NOT_FOUND = -1

# Token: root letter (either case), optional # or b, then the rest of a
# single line verbatim
_TOKEN_RE = re.compile(r"([A-Ga-g])([#b]?)(.*)")

# Note-like run inside a line: a root letter up to the next separator
_LINE_TOKEN_RE = re.compile(r"[A-Ga-g][#b]?[^ \t\n\r]*")


@dataclass(frozen=True)
class Token:
    root: str
    accidental: str
    suffix: str


def wrap12(index: int) -> int:
    """Normalize any integer into the pitch-class range 0-11."""
    return index % 12


def parse_token(token: str) -> Token | None:
    """Split a chord-like string into root, accidental and suffix.

    The root is uppercased; the suffix is kept exactly as written.
    Returns None when the string does not start with A-G or spans
    more than one line.
    """
    m = _TOKEN_RE.fullmatch(token)
    if not m:
        return None
    return Token(m.group(1).upper(), m.group(2), m.group(3))


def note_index(root: str, accidental: str = "") -> int:
    """Return the pitch class of a note name, or NOT_FOUND (-1)."""
    name = root + accidental
    if name in SHARP_NOTES:
        return SHARP_NOTES.index(name)
    if name in FLAT_NOTES:
        return FLAT_NOTES.index(name)
    alias = ENHARMONIC_ALIASES.get(name)
    if alias is not None:
        return SHARP_NOTES.index(alias)
    return NOT_FOUND


def format_note(index: int, spelling: str) -> str:
    idx = wrap12(index)
    return FLAT_NOTES[idx] if spelling == "flats" else SHARP_NOTES[idx]


def resolve_spelling(prefer_target_flats: bool, notation: str) -> str:
    """Pick "sharps" or "flats" for output.

    "auto" follows the target's preference; an explicit notation wins
    over it.
    """
    if notation == "auto":
        return "flats" if prefer_target_flats else "sharps"
    return notation


def transpose_single_entry(
    token: str,
    semitones: int,
    prefer_target_flats: bool,
    notation: str = "auto",
) -> str:
    """Transpose the root of one chord symbol, keeping its suffix.

    Unparseable or unknown roots come back unchanged.
    """
    parsed = parse_token(token)
    if parsed is None:
        return token

    idx = note_index(parsed.root, parsed.accidental)
    if idx == NOT_FOUND:
        return token

    spelling = resolve_spelling(prefer_target_flats, notation)
    return format_note(idx + semitones, spelling) + parsed.suffix


def transpose_line(
    line: str,
    semitones: int,
    prefer_target_flats: bool,
    notation: str = "auto",
) -> str:
    """Transpose every note-like token in a line of text.

    Text between tokens is left as is. Only the leading root of each
    token moves, so the bass of a slash chord ("C/G") is not transposed.
    """
    return _LINE_TOKEN_RE.sub(
        lambda m: transpose_single_entry(
            m.group(0), semitones, prefer_target_flats, notation
        ),
        line,
    )


def transpose_text(
    text: str,
    semitones: int,
    prefer_target_flats: bool,
    notation: str = "auto",
) -> str:
    """Transpose a whole document line by line, preserving line order."""
    return "\n".join(
        transpose_line(line, semitones, prefer_target_flats, notation)
        for line in text.split("\n")
    )
