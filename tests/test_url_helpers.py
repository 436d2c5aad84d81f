import pytest

from domainsage.utils.errors import InvalidInput
from domainsage.utils.url_helpers import split_scheme, split_url


def test_scheme_host_path():
    assert split_url("http://www.example.com/path/to/page") == ("http", "www.example.com", "/path/to/page")


def test_bare_host():
    assert split_url("example.com") == (None, "example.com", None)


def test_root_path_is_dropped():
    assert split_url("https://example.com/") == ("https", "example.com", None)


def test_path_without_scheme():
    assert split_url("example.com/about") == (None, "example.com", "/about")


def test_three_slashes():
    assert split_url("file:///etc/hosts") == ("file", "etc", "/hosts")


def test_scheme_case_is_kept():
    assert split_url("HTTP://Example.com") == ("HTTP", "Example.com", None)


def test_compound_scheme():
    assert split_url("git+ssh://git.example.org/repo.git") == ("git+ssh", "git.example.org", "/repo.git")


def test_scheme_match_is_not_greedy():
    url = "http://a.example.com/redirect?to=https://b.example.net/x"
    assert split_url(url) == ("http", "a.example.com", "/redirect?to=https://b.example.net/x")


def test_no_scheme_without_slashes():
    assert split_scheme("mailto:someone@example.com") == (None, "mailto:someone@example.com")


def test_empty_host():
    assert split_url("http://") == ("http", "", None)


def test_none_rejected():
    with pytest.raises(InvalidInput):
        split_url(None)
