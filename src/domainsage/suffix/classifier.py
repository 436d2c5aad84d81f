from typing import NamedTuple

from domainsage.config.loader import MAX_LABELS
from domainsage.suffix.matcher import is_public_suffix, match_suffix
from domainsage.utils.errors import InvalidInput, NoRegistrableDomain


class HostParts(NamedTuple):
    registerable_domain: str
    public_suffix: str
    subdomain: str | None


def host_labels(host):
    """Lowercased labels of ``host``, leftmost first, without the root dot."""
    if host is None or not host.strip():
        raise InvalidInput("host must be a non-empty string")

    labels = host.lower().removesuffix(".").split(".")
    if "" in labels:
        raise InvalidInput(f"host {host!r} has an empty label")
    return labels


class HostClassifier:
    """Splits host names into subdomain, registrable domain and public suffix."""

    def __init__(self, rules, max_labels=MAX_LABELS, strict=False):
        self.rules = rules
        self.max_labels = max_labels
        self.strict = strict

    def get_registerable_domain(self, host):
        labels = host_labels(host)
        return match_suffix(labels, self.rules, self.max_labels)

    def get_public_suffix(self, host):
        registerable = self.get_registerable_domain(host)
        return public_suffix_of(registerable)

    def classify(self, host):
        """
        Classify ``host`` into a HostParts tuple.

        With ``strict`` set, a host that is itself a public suffix (``co.uk``)
        raises NoRegistrableDomain instead of returning it as its own
        registrable domain.
        """
        labels = host_labels(host)

        if self.strict and is_public_suffix(labels, self.rules, self.max_labels):
            raise NoRegistrableDomain(host)

        registerable = match_suffix(labels, self.rules, self.max_labels)
        registerable_labels = registerable.split(".")

        # registerable is always a tail of labels
        subdomain_labels = labels[:len(labels) - len(registerable_labels)]

        return HostParts(
            registerable_domain=registerable,
            public_suffix=public_suffix_of(registerable),
            subdomain=".".join(subdomain_labels) or None,
        )


def public_suffix_of(registerable):
    """Drop the leftmost label; a single label has an empty suffix."""
    _, _, suffix = registerable.partition(".")
    return suffix
