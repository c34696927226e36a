"""
Registry of the supported Motopass websites.
"""
from types import MappingProxyType
from typing import List, Mapping
from .models import SiteProfile

UNSUPPORTED_SITE_MESSAGE = "Site non supporté"

class UnsupportedSiteError(ValueError):
    """Raised when a request references a site key outside the registry."""

    def __init__(self, site):
        self.site = site
        super().__init__(UNSUPPORTED_SITE_MESSAGE)

_PROFILES = (
    SiteProfile(
        key="motopass-fr",
        display_name="Motopass France",
        base_url="https://www.motopass.fr",
        content_api_url="https://www.motopass.fr/wp-json/wp/v2/",
        language_code="fr",
        market_name="france",
        currency_code="EUR",
        homepage_id=1124,
    ),
    SiteProfile(
        key="motopass-es",
        display_name="Portacredenciales España",
        base_url="https://www.portacredenciales-motopass.es",
        content_api_url="https://www.portacredenciales-motopass.es/wp-json/wp/v2/",
        language_code="es",
        market_name="spain",
        currency_code="EUR",
        homepage_id=3659,
    ),
    SiteProfile(
        key="motopass-be",
        display_name="Motopass Belgique",
        base_url="https://www.motopass.be",
        content_api_url="https://www.motopass.be/wp-json/wp/v2/",
        language_code="fr",
        market_name="belgium",
        currency_code="EUR",
        homepage_id=1124,
    ),
)

# Read-only, insertion ordered
SITES: Mapping[str, SiteProfile] = MappingProxyType({p.key: p for p in _PROFILES})

def site_keys() -> List[str]:
    return list(SITES)

def lookup(key) -> SiteProfile:
    """
    Return the profile registered under `key`.

    Raises:
        UnsupportedSiteError: If `key` is not one of the registered sites.
    """
    # Non-string keys (None, numbers, lists) can never match
    if not isinstance(key, str) or key not in SITES:
        raise UnsupportedSiteError(key)
    return SITES[key]
