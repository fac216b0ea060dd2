from typing import List

from pydantic import BaseModel, Field, field_validator


class DefinitionItem(BaseModel):
    """One sense of a meaning; examples, synonyms and other keys are ignored."""

    definition: str


class Meaning(BaseModel):
    part_of_speech: str = Field(..., alias="partOfSpeech")
    definitions: List[DefinitionItem]

    @field_validator("part_of_speech")
    @classmethod
    def validate_part_of_speech(cls, v):
        v = v.strip()
        if not v:
            raise ValueError("partOfSpeech must not be empty")
        return v


class DictionaryEntry(BaseModel):
    """First entry of a dictionary API response: word -> meanings grouped by part of speech."""

    meanings: List[Meaning]
