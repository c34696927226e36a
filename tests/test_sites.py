"""
Tests for the site registry.
"""

import pytest
from pydantic import ValidationError

from motopass_seo.sites import SITES, UnsupportedSiteError, lookup, site_keys


def test_site_keys_are_fixed_and_ordered():
    assert site_keys() == ["motopass-fr", "motopass-es", "motopass-be"]


@pytest.mark.parametrize("key,name,market,language,homepage_id", [
    ("motopass-fr", "Motopass France", "france", "fr", 1124),
    ("motopass-es", "Portacredenciales España", "spain", "es", 3659),
    ("motopass-be", "Motopass Belgique", "belgium", "fr", 1124),
])
def test_lookup_returns_profile(key, name, market, language, homepage_id):
    profile = lookup(key)
    assert profile.key == key
    assert profile.display_name == name
    assert profile.market_name == market
    assert profile.language_code == language
    assert profile.currency_code == "EUR"
    assert profile.homepage_id == homepage_id
    assert profile.content_api_url == f"{profile.base_url}/wp-json/wp/v2/"


@pytest.mark.parametrize("key", ["bogus-site", "", "MOTOPASS-FR", " motopass-fr", None, 42, ["motopass-fr"]])
def test_lookup_rejects_unknown_keys(key):
    with pytest.raises(UnsupportedSiteError) as exc_info:
        lookup(key)
    assert str(exc_info.value) == "Site non supporté"
    assert exc_info.value.site == key


def test_unsupported_site_is_a_value_error():
    assert issubclass(UnsupportedSiteError, ValueError)


def test_registry_is_read_only():
    with pytest.raises(TypeError):
        SITES["motopass-de"] = SITES["motopass-fr"]


def test_profiles_are_immutable():
    profile = lookup("motopass-fr")
    with pytest.raises(ValidationError):
        profile.market_name = "germany"
    assert lookup("motopass-fr").market_name == "france"
