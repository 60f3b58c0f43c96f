"""
Normalization helpers for comparing free-text feed values
"""
from typing import Optional


def normalize_provider(provider: Optional[str]) -> str:
    """Canonicalize a provider name for comparison.

    Feeds are inconsistent about case and surrounding whitespace, e.g.
    " Clinic A " and "clinic a" refer to the same provider.
    """
    if not provider:
        return ""

    return provider.strip().lower()
