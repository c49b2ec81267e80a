# config.py
from dataclasses import dataclass
from typing import Optional

@dataclass
class Config:
    """Holds all application configuration."""
    AVAILABILITY_URL: str = "https://archive.org/wayback/available?url={term}&timestamp={start}&end_timestamp={end}"
    CDX_URL: str = "https://web.archive.org/cdx/search/cdx?url={term}&from={start}&to={end}&output=json"
    FIRST_YEAR: int = 2002
    YEAR_COUNT: int = 20
    START_SENTINEL: str = "beginning"
    END_SENTINEL: str = "current"
    REQUEST_TIMEOUT: Optional[float] = None
    LOG_LEVEL: str = "INFO"
