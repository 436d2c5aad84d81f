class DomainSageError(Exception):
    """Base class for every error raised by domainsage."""


class InvalidInput(DomainSageError, ValueError):
    """Host or URL cannot be classified at all (None, empty, too many labels)."""


class NoRegistrableDomain(DomainSageError, ValueError):
    """The host is itself a public suffix, so nothing under it is registrable."""

    def __init__(self, host):
        self.host = host
        super().__init__(f"{host!r} is a public suffix and has no registrable domain")


class SuffixListError(DomainSageError, RuntimeError):
    """The Public Suffix List could not be read or parsed."""
