"""APIの入出力スキーマ。"""
from __future__ import annotations

from pydantic import BaseModel, Field

from core.pipeline import ConversionMode


class TransliterationRequest(BaseModel):
    mode: ConversionMode
    text: str = Field(min_length=1)


class TransliterationResponse(BaseModel):
    mode: ConversionMode
    text: str
    tokens: list[str]
    output: str


class ModesResponse(BaseModel):
    modes: list[ConversionMode]
