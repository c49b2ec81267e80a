# models.py
from dataclasses import dataclass, field, replace
from typing import Any, List, Optional, Tuple

from config import Config

_DEFAULTS = Config()

YEARS: List[str] = [str(_DEFAULTS.FIRST_YEAR + i) for i in range(_DEFAULTS.YEAR_COUNT)]

# (label, value) pairs, in the order the dropdowns show them.
START_YEAR_CHOICES: List[Tuple[str, str]] = [("The beginning", _DEFAULTS.START_SENTINEL)] + [(y, y) for y in YEARS]
END_YEAR_CHOICES: List[Tuple[str, str]] = [("Current", _DEFAULTS.END_SENTINEL)] + [(y, y) for y in YEARS]

START_YEAR_OPTIONS: List[str] = [value for _, value in START_YEAR_CHOICES]
END_YEAR_OPTIONS: List[str] = [value for _, value in END_YEAR_CHOICES]

@dataclass(frozen=True)
class YearRange:
    """The start/end pair sent to both endpoints. No ordering is enforced."""
    start: str = _DEFAULTS.START_SENTINEL
    end: str = _DEFAULTS.END_SENTINEL

    def with_field(self, field_name: str, value: str) -> "YearRange":
        """Returns a copy with only `field_name` replaced."""
        if field_name not in ("start", "end"):
            raise ValueError(f"Unknown year range field: {field_name!r}")
        return replace(self, **{field_name: value})

@dataclass(frozen=True)
class ResultRecord:
    """The part of a raw result the results panel shows."""
    title: Optional[str] = None
    description: Optional[str] = None

    @classmethod
    def from_payload(cls, payload: Any) -> "ResultRecord":
        if not isinstance(payload, dict):
            return cls()
        title = payload.get("title")
        description = payload.get("description")
        return cls(
            title=None if title is None else str(title),
            description=None if description is None else str(description),
        )

    @property
    def heading(self) -> str:
        return self.title or ""

    @property
    def body(self) -> str:
        return self.description or ""

@dataclass
class AppState:
    """A single object to hold the entire application state."""
    search_term: str = ""
    year_range: YearRange = field(default_factory=YearRange)
    loading: bool = False
    results: List[Any] = field(default_factory=list)
