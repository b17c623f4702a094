from typing import List

from pydantic import BaseModel


class InstrumentProfile(BaseModel):
    value: str
    label: str
    transpose_semitones: int
    prefers_flats: bool = False


class ConcertKey(BaseModel):
    name: str
    value: int
    prefers_flats: bool = False


class InstrumentListResponse(BaseModel):
    instruments: List[InstrumentProfile]


class ConcertKeyListResponse(BaseModel):
    keys: List[ConcertKey]
