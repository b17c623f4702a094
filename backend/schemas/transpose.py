from typing import Literal, Optional

from pydantic import BaseModel, field_validator

from services.theory import Notation

TransposeMode = Literal["instrument", "key"]


class TransposeRequest(BaseModel):
    semitones: int
    prefer_flats: bool = False
    notation: Notation = "auto"


class EntryTransposeRequest(TransposeRequest):
    token: str


class LineTransposeRequest(TransposeRequest):
    line: str

    @field_validator("line")
    @classmethod
    def line_must_be_single(cls, v: str) -> str:
        if "\n" in v:
            raise ValueError("line must not contain newlines; use /transpose/text")
        return v


class TransposeResult(BaseModel):
    input: str
    output: str


class TextTransposeRequest(BaseModel):
    text: str
    mode: TransposeMode = "instrument"
    origin: Optional[str] = None
    target: Optional[str] = None
    notation: Notation = "sharps"


class TextTransposeResponse(BaseModel):
    mode: TransposeMode
    origin: str
    target: str
    semitones: int
    prefer_flats: bool
    notation: Notation
    text: str
