import dataclasses

import pytest

from domainsage.suffix.classifier import HostClassifier
from domainsage.utils.errors import InvalidInput, NoRegistrableDomain
from domainsage.utils.url_parser import ParsedUrl, UrlParser, parse_url


def test_parse_full_url(psl_rules):
    parsed = parse_url("https://shop.example.co.uk/cart/checkout", rules=psl_rules)
    assert parsed == ParsedUrl(
        url="https://shop.example.co.uk/cart/checkout",
        scheme="https",
        path="/cart/checkout",
        host="shop.example.co.uk",
        registerable_domain="example.co.uk",
        public_suffix="co.uk",
        subdomain="shop",
    )


def test_parse_bare_host(psl_rules):
    parsed = parse_url("example.com", rules=psl_rules)
    assert parsed.scheme is None
    assert parsed.path is None
    assert parsed.host == "example.com"
    assert parsed.subdomain is None


def test_host_keeps_original_case(psl_rules):
    parsed = parse_url("http://WWW.Example.com/", rules=psl_rules)
    assert parsed.host == "WWW.Example.com"
    assert parsed.registerable_domain == "example.com"
    assert parsed.subdomain == "www"


def test_as_dict(psl_rules):
    record = parse_url("http://localhost/admin", rules=psl_rules).as_dict()
    assert record == {
        "url": "http://localhost/admin",
        "scheme": "http",
        "path": "/admin",
        "host": "localhost",
        "registerable_domain": "localhost",
        "public_suffix": "",
        "subdomain": None,
    }


def test_parsed_url_is_frozen(psl_rules):
    parsed = parse_url("example.com", rules=psl_rules)
    with pytest.raises(dataclasses.FrozenInstanceError):
        parsed.host = "other.com"


@pytest.mark.parametrize("url", ["https://", "/just/a/path", ""])
def test_missing_host_rejected(psl_rules, url):
    with pytest.raises(InvalidInput):
        parse_url(url, rules=psl_rules)


def test_strict_mode(psl_rules):
    assert parse_url("https://co.uk", rules=psl_rules, strict=False).registerable_domain == "co.uk"
    with pytest.raises(NoRegistrableDomain):
        parse_url("https://co.uk", rules=psl_rules, strict=True)


def test_parser_with_classifier():
    parser = UrlParser(classifier=HostClassifier({"ck": {"*": {}}}))
    parsed = parser.parse("http://a.b.ck/")
    assert parsed.registerable_domain == "a.b.ck"
    assert parsed.public_suffix == "b.ck"
    assert parsed.path is None


def test_default_rule_table():
    parsed = parse_url("https://maps.google.co.uk/place")
    assert parsed.registerable_domain == "google.co.uk"
    assert parsed.public_suffix == "co.uk"
    assert parsed.subdomain == "maps"
