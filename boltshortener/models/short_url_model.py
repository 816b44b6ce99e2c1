from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional


@dataclass(frozen=True)
class ShortURLModel:
    """Represent a shortened URL mapping.

    Attributes:
        target (str):
            The original URL that the shortcode redirects to. Stored verbatim
            (trimmed, case-preserving).
        shortcode (int):
            Positive integer assigned in creation order, starting at 1.
        created_at (Optional[datetime]):
            UTC creation time. Informational only, not part of the API response.

    Example:
        >>> url = ShortURLModel(target="https://example.com/page", shortcode=1)
        >>> url.target
        'https://example.com/page'
        >>> url.shortcode
        1
        >>> url.to_dict()
        {'original_url': 'https://example.com/page', 'short_url': 1}
    """
    target: str
    shortcode: int
    created_at: Optional[datetime] = None

    def to_dict(self) -> dict[str, Any]:
        """Return the API representation of the mapping."""
        return {
            'original_url': self.target,
            'short_url': self.shortcode,
        }
