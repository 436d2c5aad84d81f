import re
from domainsage.utils.errors import InvalidInput

# scheme followed by two or three slashes, e.g. http:// or file:///
SCHEME_RE = re.compile(r"^(\w.*?):/{2,3}", re.IGNORECASE)


def split_scheme(url):
    """Return (scheme, remainder). scheme is None when the url has none."""
    match = SCHEME_RE.match(url)
    if not match:
        return None, url
    return match.group(1), url[match.end():]


def split_url(url):
    """
    Split a URL-like string into (scheme, host, path).

    No validation is done: whatever sits between the scheme separator and
    the first "/" is the host. A path of just "/" is reported as None.
    """
    if url is None:
        raise InvalidInput("url must be a string")

    scheme, remainder = split_scheme(url)

    host, slash, rest = remainder.partition("/")
    path = slash + rest if slash else None

    if path is not None and len(path) <= 1:
        path = None

    return scheme, host, path
