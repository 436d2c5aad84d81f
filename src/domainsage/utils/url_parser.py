from dataclasses import asdict, dataclass
from domainsage.config.loader import MAX_LABELS, STRICT
from domainsage.suffix.classifier import HostClassifier
from domainsage.suffix.rules import default_rule_table
from domainsage.utils.url_helpers import split_url


@dataclass(frozen=True)
class ParsedUrl:
    url: str
    scheme: str | None
    path: str | None
    host: str
    registerable_domain: str
    public_suffix: str
    subdomain: str | None

    def as_dict(self):
        return asdict(self)


class UrlParser:
    """Splits URLs and classifies their host against one rule table."""

    def __init__(self, rules=None, classifier=None, strict=STRICT, max_labels=MAX_LABELS):
        if classifier is None:
            if rules is None:
                rules = default_rule_table()
            classifier = HostClassifier(rules, max_labels=max_labels, strict=strict)
        self.classifier = classifier

    def parse(self, url):
        scheme, host, path = split_url(url)
        parts = self.classifier.classify(host)

        return ParsedUrl(
            url=url,
            scheme=scheme,
            path=path,
            host=host,
            registerable_domain=parts.registerable_domain,
            public_suffix=parts.public_suffix,
            subdomain=parts.subdomain,
        )


def parse_url(url, rules=None, strict=None):
    """Parse ``url`` with ``rules``, or with the configured suffix list."""
    if strict is None:
        strict = STRICT
    return UrlParser(rules=rules, strict=strict).parse(url)
