"""Transposing-instrument and concert-key catalogs.

Each entry carries a semitone offset relative to concert pitch and a
spelling preference. A transposition between two entries only needs the
difference of their offsets and the target's preference.
"""

from schemas.instruments import ConcertKey, InstrumentProfile
from schemas.transpose import TransposeRequest
from services.theory import Notation

INSTRUMENTS: tuple[InstrumentProfile, ...] = (
    InstrumentProfile(
        value="C", label="C / Concert (piano, flute)",
        transpose_semitones=0, prefers_flats=False,
    ),
    InstrumentProfile(
        value="Bb", label="Bb (trumpet, Bb clarinet)",
        transpose_semitones=2, prefers_flats=True,
    ),
    InstrumentProfile(
        value="Eb", label="Eb (alto sax, baritone sax)",
        transpose_semitones=-3, prefers_flats=True,
    ),
    InstrumentProfile(
        value="F", label="F (French horn)",
        transpose_semitones=-5, prefers_flats=True,
    ),
)

CONCERT_KEYS: tuple[ConcertKey, ...] = (
    ConcertKey(name="C", value=0),
    ConcertKey(name="Db", value=1, prefers_flats=True),
    ConcertKey(name="D", value=2),
    ConcertKey(name="Eb", value=3, prefers_flats=True),
    ConcertKey(name="E", value=4),
    ConcertKey(name="F", value=5, prefers_flats=True),
    ConcertKey(name="Gb", value=6, prefers_flats=True),
    ConcertKey(name="G", value=7),
    ConcertKey(name="Ab", value=8, prefers_flats=True),
    ConcertKey(name="A", value=9),
    ConcertKey(name="Bb", value=10, prefers_flats=True),
    ConcertKey(name="B", value=11),
)

_INSTRUMENTS_BY_VALUE = {i.value: i for i in INSTRUMENTS}
_KEYS_BY_NAME = {k.name: k for k in CONCERT_KEYS}


class UnknownProfileError(ValueError):
    pass


def get_instrument(value: str) -> InstrumentProfile:
    instrument = _INSTRUMENTS_BY_VALUE.get(value)
    if instrument is None:
        raise UnknownProfileError(f"Unknown instrument: {value!r}")
    return instrument


def get_concert_key(name: str) -> ConcertKey:
    key = _KEYS_BY_NAME.get(name)
    if key is None:
        raise UnknownProfileError(f"Unknown concert key: {name!r}")
    return key


def build_transpose_request(
    origin_offset: int,
    target_offset: int,
    target_prefers_flats: bool,
    notation: Notation = "auto",
) -> TransposeRequest:
    """Semitones are target minus origin, not reduced mod 12."""
    return TransposeRequest(
        semitones=target_offset - origin_offset,
        prefer_flats=target_prefers_flats,
        notation=notation,
    )


def request_for_instruments(
    origin: str, target: str, notation: Notation = "auto"
) -> TransposeRequest:
    src = get_instrument(origin)
    dst = get_instrument(target)
    return build_transpose_request(
        src.transpose_semitones, dst.transpose_semitones, dst.prefers_flats, notation
    )


def request_for_keys(
    origin: str, target: str, notation: Notation = "auto"
) -> TransposeRequest:
    src = get_concert_key(origin)
    dst = get_concert_key(target)
    return build_transpose_request(src.value, dst.value, dst.prefers_flats, notation)


def request_for_mode(
    mode: str, origin: str, target: str, notation: Notation = "auto"
) -> TransposeRequest:
    if mode == "instrument":
        return request_for_instruments(origin, target, notation)
    if mode == "key":
        return request_for_keys(origin, target, notation)
    raise ValueError(f"Unknown transpose mode: {mode!r}")
