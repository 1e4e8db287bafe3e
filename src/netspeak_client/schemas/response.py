"""Pydantic models decoding the JSON documents returned by Netspeak.

The service has shipped a few generations of its JSON encoding: the
protobuf-derived one uses camelCase singular list names (``phrase``,
``queryResult``), later versions pluralise them. The models accept every
spelling so one client works against all of them.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, List

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError, field_validator

from netspeak_client.utils.errors import CommunicationError


class WordTag(str, Enum):
    """Role a word plays with respect to the query that matched it."""

    WORD = "WORD"
    WORD_IN_OPTIONSET = "WORD_IN_OPTIONSET"
    WORD_IN_ORDERSET = "WORD_IN_ORDERSET"
    WORD_FOR_QMARK = "WORD_FOR_QMARK"
    WORD_FOR_ASTERISK = "WORD_FOR_ASTERISK"
    WORD_IN_DICTSET = "WORD_IN_DICTSET"
    WORD_FOR_PLUS = "WORD_FOR_PLUS"


_TAGS_BY_NUMBER = tuple(WordTag)

_MODEL_CONFIG = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)


class Word(BaseModel):
    """Single word of a phrase."""

    model_config = _MODEL_CONFIG

    text: str = Field(..., description="Surface form of the word.")
    tag: WordTag | str = Field(default=WordTag.WORD, description="Netspeak word tag.")

    @field_validator("tag", mode="before")
    @classmethod
    def coerce_tag(cls, value: object) -> object:
        """Map numeric protobuf tags to names and keep unknown tags verbatim."""
        if isinstance(value, int):
            if 0 <= value < len(_TAGS_BY_NUMBER):
                return _TAGS_BY_NUMBER[value]
            return str(value)
        if isinstance(value, str):
            try:
                return WordTag(value.upper())
            except ValueError:
                return value
        return value


class Phrase(BaseModel):
    """Search result unit: a sequence of words with its corpus frequency."""

    model_config = _MODEL_CONFIG

    id: int = Field(default=0, description="Service-side phrase identifier.")
    frequency: int = Field(default=0, ge=0, description="Occurrences of the phrase in the corpus.")
    words: List[Word] = Field(
        default_factory=list, validation_alias=AliasChoices("words", "word")
    )

    @property
    def text(self) -> str:
        """Return the phrase words joined by single spaces."""
        return " ".join(word.text for word in self.words)


class Response(BaseModel):
    """Final result of a Netspeak search."""

    model_config = _MODEL_CONFIG

    request: Dict[str, object] = Field(
        default_factory=dict, description="Request echoed by the service."
    )
    phrases: List[Phrase] = Field(
        default_factory=list, validation_alias=AliasChoices("phrases", "phrase")
    )
    total_frequency: int = Field(
        default=0,
        ge=0,
        validation_alias=AliasChoices("totalFrequency", "total_frequency"),
    )
    error_code: int = Field(default=0, validation_alias=AliasChoices("errorCode", "error_code"))
    error_message: str = Field(
        default="", validation_alias=AliasChoices("errorMessage", "error_message")
    )
    unknown_words: List[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices("unknownWords", "unknownWord", "unknown_words", "unknown_word"),
    )
    query_tokens: List[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices(
            "queryTokens", "queryToken", "query_tokens", "query_token", "tokens"
        ),
    )

    @property
    def phrase_count(self) -> int:
        """Return the number of phrases contained in the response."""
        return len(self.phrases)


class QueryResult(BaseModel):
    """Intermediate retrieval data recorded for one normalised sub-query."""

    model_config = _MODEL_CONFIG

    query: object | None = Field(default=None, description="Normalised query as reported by the service.")
    units: List[object] = Field(
        default_factory=list, validation_alias=AliasChoices("units", "unit")
    )
    phrases: List[Phrase] = Field(
        default_factory=list, validation_alias=AliasChoices("phrases", "phrase")
    )
    total_frequency: int = Field(
        default=0,
        ge=0,
        validation_alias=AliasChoices("totalFrequency", "total_frequency"),
    )


class RawResponse(BaseModel):
    """Diagnostic result of a raw search; carries no final phrase list."""

    model_config = _MODEL_CONFIG

    request: Dict[str, object] = Field(
        default_factory=dict, description="Request echoed by the service."
    )
    query_results: List[QueryResult] = Field(
        default_factory=list,
        validation_alias=AliasChoices("queryResults", "queryResult", "query_results", "query_result"),
    )

    @property
    def query_result_count(self) -> int:
        """Return the number of per-query results."""
        return len(self.query_results)


def parse_response(content: bytes | str) -> Response:
    """Decode a response body into a :class:`Response`."""
    try:
        return Response.model_validate_json(content)
    except ValidationError as exc:
        raise CommunicationError(
            f"Malformed Netspeak response: {exc.error_count()} validation error(s)",
            details={"errors": [error["msg"] for error in exc.errors()]},
        ) from exc


def parse_raw_response(content: bytes | str) -> RawResponse:
    """Decode a raw response body into a :class:`RawResponse`."""
    try:
        return RawResponse.model_validate_json(content)
    except ValidationError as exc:
        raise CommunicationError(
            f"Malformed Netspeak raw response: {exc.error_count()} validation error(s)",
            details={"errors": [error["msg"] for error in exc.errors()]},
        ) from exc


__all__ = [
    "Phrase",
    "QueryResult",
    "RawResponse",
    "Response",
    "Word",
    "WordTag",
    "parse_raw_response",
    "parse_response",
]
