"""Configuration for ytmweb."""

from dataclasses import dataclass

SUPPORTED_LANGUAGES = frozenset(
    {
        "ar", "cs", "de", "en", "es", "fr", "hi", "it", "ja",
        "ko", "nl", "pt", "ru", "tr", "ur", "zh_CN", "zh_TW",
    }
)  # fmt: skip

SUPPORTED_LOCATIONS = frozenset(
    {
        "AE", "AR", "AT", "AU", "AZ", "BA", "BD", "BE", "BG", "BH", "BO", "BR",
        "BY", "CA", "CH", "CL", "CO", "CR", "CY", "CZ", "DE", "DK", "DO", "DZ",
        "EC", "EE", "EG", "ES", "FI", "FR", "GB", "GE", "GH", "GR", "GT", "HK",
        "HN", "HR", "HU", "ID", "IE", "IL", "IN", "IQ", "IS", "IT", "JM", "JO",
        "JP", "KE", "KH", "KR", "KW", "KZ", "LA", "LB", "LI", "LK", "LT", "LU",
        "LV", "LY", "MA", "ME", "MK", "MT", "MX", "MY", "NG", "NI", "NL", "NO",
        "NP", "NZ", "OM", "PA", "PE", "PH", "PK", "PL", "PR", "PT", "PY", "QA",
        "RO", "RS", "RU", "SA", "SE", "SG", "SI", "SK", "SN", "SV", "TH", "TN",
        "TR", "TW", "TZ", "UA", "UG", "US", "UY", "VE", "VN", "YE", "ZA", "ZW",
    }
)  # fmt: skip


@dataclass(frozen=True)
class ClientConfig:
    """YouTube Music client configuration.

    Attributes:
        language: Interface language for returned text (``hl``).
        location: Country used for regional content (``gl``).
        timeout: HTTP request timeout in seconds.
        fetch_visitor_id: Scrape a visitor id from the home page before the
            first API request. Some endpoints return thinner pages without it.
    """

    language: str = "en"
    location: str = "US"
    timeout: float = 30.0
    fetch_visitor_id: bool = True

    def __post_init__(self) -> None:
        if self.language not in SUPPORTED_LANGUAGES:
            raise ValueError(
                f"Unsupported language: {self.language}. "
                f"Supported: {', '.join(sorted(SUPPORTED_LANGUAGES))}"
            )
        if self.location not in SUPPORTED_LOCATIONS:
            raise ValueError(
                f"Unsupported location: {self.location}. "
                f"Supported: {', '.join(sorted(SUPPORTED_LOCATIONS))}"
            )
