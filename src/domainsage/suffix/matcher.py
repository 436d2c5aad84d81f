"""
Longest-match lookup of host labels against a Public Suffix List trie.

A rule table is a nested read-only mapping: each key is a lowercase label
(or the markers below) and each value is the table one level further left.
``com -> {}`` encodes the rule ``com``, ``ck -> {"*": {}}`` encodes
``*.ck`` and ``ck -> {"www": {"!": {}}}`` encodes ``!www.ck``.
"""
from collections.abc import Mapping, Sequence

from domainsage.config.loader import MAX_LABELS
from domainsage.utils.errors import InvalidInput

WILDCARD = "*"
EXCEPTION = "!"

RuleTable = Mapping[str, "RuleTable"]


def _check_length(labels, max_labels):
    if len(labels) > max_labels:
        raise InvalidInput(
            f"host has {len(labels)} labels, more than the allowed {max_labels}"
        )


def _label_count(suffix):
    return suffix.count(".") + 1


def _breakdown(labels, rules):
    """
    Walk ``labels`` from the right through ``rules``.

    Returns the matched public suffix plus the first label that no rule
    covers, or None once ``labels`` runs out.
    """
    if not labels:
        return None

    part = labels[-1]
    rest = labels[:-1]
    result = None

    child = rules.get(part)
    if child is not None:
        # !label: this label is registrable even under a wildcard
        if EXCEPTION in child:
            return part
        result = _breakdown(rest, child)

    wildcard = rules.get(WILDCARD)
    if wildcard is not None:
        deeper = _breakdown(rest, wildcard)
        # longest match: the exact branch keeps only a strictly deeper result
        if deeper is not None and (result is None or _label_count(deeper) >= _label_count(result)):
            result = deeper

    if result is None:
        return part

    return f"{result}.{part}"


def match_suffix(labels: Sequence[str], rules: RuleTable, max_labels: int = MAX_LABELS) -> str:
    """
    Return the registrable part of ``labels`` (public suffix plus one label).

    ``labels`` must already be lowercased, leftmost label first. An empty
    sequence gives ``""``. When the rightmost label has no rule at all it is
    returned on its own.
    """
    labels = list(labels)
    _check_length(labels, max_labels)
    return _breakdown(labels, rules) or ""


def _consumed(labels, rules):
    if not labels:
        return True

    part = labels[-1]
    rest = labels[:-1]

    child = rules.get(part)
    if child is not None:
        if EXCEPTION in child:
            return False
        if _consumed(rest, child):
            return True

    wildcard = rules.get(WILDCARD)
    return wildcard is not None and _consumed(rest, wildcard)


def is_public_suffix(labels: Sequence[str], rules: RuleTable, max_labels: int = MAX_LABELS) -> bool:
    """True when every label of ``labels`` is covered by a rule (exact or wildcard)."""
    labels = list(labels)
    _check_length(labels, max_labels)
    if not labels:
        return False
    return _consumed(labels, rules)
