"""Request parameters accepted by the Netspeak REST interface."""

from __future__ import annotations

from typing import ClassVar, Dict, FrozenSet, Iterator, List, MutableMapping, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator

from netspeak_client.utils.errors import InvalidParameterError

# NOTE: all parameter names are lower case; ``Request`` normalises keys on the
# way in so lookups stay case-insensitive.
FORMAT = "format"
PHIGH = "phigh"
PLOW = "plow"
RAW = "raw"

CORPUS = "corpus"
MAXFREQ = "maxfreq"
NMAX = "nmax"
NMIN = "nmin"
QUERY = "query"
TOPK = "topk"

PROTECTED_PARAMETERS: FrozenSet[str] = frozenset({FORMAT, PHIGH, PLOW})
"""Names reserved for internal use; the serializer never emits caller values for them."""

PUBLIC_PARAMETERS: FrozenSet[str] = frozenset({CORPUS, MAXFREQ, NMAX, NMIN, QUERY, TOPK})
"""Well-known parameters callers are expected to set."""


def normalize_name(name: str) -> str:
    """Return the canonical (trimmed, lower-cased) form of a parameter name."""
    return name.strip().lower()


class Request(MutableMapping[str, str]):
    """Mapping of Netspeak parameters keyed by their lower-cased name.

    Any name can be stored so the client keeps working when the service grows
    new parameters. Protected names (see :data:`PROTECTED_PARAMETERS`) may be
    inserted too, but :func:`~netspeak_client.services.search.query.build_query_string`
    drops them, which keeps callers from spoofing the internal ``format`` and
    probability-bound parameters.
    """

    FORMAT: ClassVar[str] = FORMAT
    PHIGH: ClassVar[str] = PHIGH
    PLOW: ClassVar[str] = PLOW
    CORPUS: ClassVar[str] = CORPUS
    MAXFREQ: ClassVar[str] = MAXFREQ
    NMAX: ClassVar[str] = NMAX
    NMIN: ClassVar[str] = NMIN
    QUERY: ClassVar[str] = QUERY
    TOPK: ClassVar[str] = TOPK
    PROTECTED_PARAMETERS: ClassVar[FrozenSet[str]] = PROTECTED_PARAMETERS
    PUBLIC_PARAMETERS: ClassVar[FrozenSet[str]] = PUBLIC_PARAMETERS

    def __init__(self, parameters: Dict[str, str] | None = None, /, **kwargs: str) -> None:
        self._data: Dict[str, str] = {}
        if parameters:
            self.update(parameters)
        if kwargs:
            self.update(kwargs)

    def set(self, name: str, value: str) -> None:
        """Insert or overwrite ``name`` with ``value``."""
        self[name] = value

    def entries(self) -> List[Tuple[str, str]]:
        """Return the stored ``(name, value)`` pairs."""
        return list(self._data.items())

    @staticmethod
    def is_protected(name: str) -> bool:
        """Return whether ``name`` is dropped during serialization."""
        return normalize_name(name) in PROTECTED_PARAMETERS

    def __setitem__(self, name: str, value: str) -> None:
        if not isinstance(name, str):
            raise InvalidParameterError(
                "Parameter names must be strings", details={"name": repr(name)}
            )
        if not isinstance(value, str):
            raise InvalidParameterError(
                f"Value of parameter '{name}' must be a string",
                details={"name": name, "type": type(value).__name__},
            )
        try:
            value.encode("utf-8")
        except UnicodeEncodeError as exc:
            raise InvalidParameterError(
                f"Value of parameter '{name}' is not encodable as UTF-8",
                details={"name": name},
            ) from exc
        self._data[normalize_name(name)] = value

    def __getitem__(self, name: str) -> str:
        return self._data[normalize_name(name)]

    def __delitem__(self, name: str) -> None:
        del self._data[normalize_name(name)]

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and normalize_name(name) in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"Request({self._data!r})"


class SearchParameters(BaseModel):
    """Typed view over the public Netspeak parameters.

    Protected names cannot be expressed here at all because the model forbids
    unknown fields. Numeric bounds mirror what the service accepts.
    """

    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)

    query: str | None = Field(
        default=None,
        min_length=1,
        description="Netspeak query, e.g. ``waiting ? response``.",
    )
    corpus: str | None = Field(
        default=None, min_length=1, description="Identifier of the corpus to search (e.g. ``web-en``)."
    )
    topk: int | None = Field(default=None, ge=1, description="Maximum number of phrases returned.")
    maxfreq: int | None = Field(
        default=None, ge=0, description="Upper bound on the frequency of returned phrases."
    )
    nmin: int | None = Field(default=None, ge=1, description="Minimum phrase length in words.")
    nmax: int | None = Field(default=None, ge=1, description="Maximum phrase length in words.")

    @model_validator(mode="after")
    def check_length_bounds(self) -> "SearchParameters":
        """Ensure the phrase length interval is not inverted."""
        if self.nmin is not None and self.nmax is not None and self.nmin > self.nmax:
            raise ValueError("nmin must not be greater than nmax")
        return self

    def to_request(self) -> Request:
        """Return a :class:`Request` holding only the parameters that were set."""
        values = self.model_dump(exclude_none=True)
        return Request({name: str(value) for name, value in values.items()})


__all__ = [
    "CORPUS",
    "FORMAT",
    "MAXFREQ",
    "NMAX",
    "NMIN",
    "PHIGH",
    "PLOW",
    "PROTECTED_PARAMETERS",
    "PUBLIC_PARAMETERS",
    "QUERY",
    "RAW",
    "TOPK",
    "Request",
    "SearchParameters",
    "normalize_name",
]
