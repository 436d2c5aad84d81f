import pkgutil
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType

from tldextract.suffix_list import extract_tlds_from_suffix_list

from domainsage.config.loader import PSL_INCLUDE_PRIVATE, PSL_PATH
from domainsage.suffix.matcher import EXCEPTION
from domainsage.utils.errors import SuffixListError


def _freeze(table):
    return MappingProxyType({label: _freeze(child) for label, child in table.items()})


def build_rule_table(rules):
    """
    Build a read-only rule trie from PSL rule strings.

    Accepts plain rules (``co.uk``), wildcards (``*.ck``) and exceptions
    (``!www.ck``). Blank lines and ``//`` comments are skipped.
    """
    root = {}

    for rule in rules:
        rule = rule.strip().lower()
        if not rule or rule.startswith("//"):
            continue

        is_exception = rule.startswith(EXCEPTION)
        labels = rule.lstrip(EXCEPTION).split(".")

        node = root
        for label in reversed(labels):
            node = node.setdefault(label, {})

        if is_exception:
            node[EXCEPTION] = {}

    return _freeze(root)


def parse_suffix_list(text, include_private=PSL_INCLUDE_PRIVATE):
    """Build a rule table from the raw text of public_suffix_list.dat."""
    public_rules, private_rules = extract_tlds_from_suffix_list(text)
    rules = public_rules + private_rules if include_private else public_rules
    if not rules:
        raise SuffixListError("Suffix list contains no rules")
    return build_rule_table(rules)


def read_bundled_snapshot():
    """Raw PSL text of the snapshot shipped with tldextract."""
    data = pkgutil.get_data("tldextract", ".tld_set_snapshot")
    if data is None:
        raise SuffixListError("tldextract suffix list snapshot is not available")
    return data.decode("utf-8")


def load_rule_table(path=None, include_private=PSL_INCLUDE_PRIVATE):
    """
    Load the rule table from a local PSL file, or from the bundled
    snapshot when no path is given.
    """
    if path is None:
        return parse_suffix_list(read_bundled_snapshot(), include_private)

    try:
        text = Path(path).read_text(encoding="utf-8")
    except FileNotFoundError:
        raise SuffixListError(f"Suffix list not found: {path}")
    except (OSError, UnicodeDecodeError) as e:
        raise SuffixListError(f"Cannot read suffix list {path}: {e}")

    return parse_suffix_list(text, include_private)


@lru_cache(maxsize=1)
def default_rule_table():
    """Rule table for the configured suffix list, loaded once per process."""
    return load_rule_table(PSL_PATH)
