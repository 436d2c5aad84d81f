import requests
from pathlib import Path
from domainsage.config.loader import (
    PSL_URL,
    PSL_FETCH_TIMEOUT_SECONDS,
    PSL_MAX_SIZE_BYTES,
    PSL_INCLUDE_PRIVATE,
)
from domainsage.suffix.matcher import EXCEPTION
from domainsage.suffix.rules import parse_suffix_list
from domainsage.utils.errors import SuffixListError


session = requests.Session()

def download(url, timeout=PSL_FETCH_TIMEOUT_SECONDS, max_size=PSL_MAX_SIZE_BYTES, debug=False):
    """GET ``url`` into memory, refusing bodies larger than ``max_size`` bytes."""
    try:
        resp = session.get(url, timeout=timeout, stream=True)
        resp.raise_for_status()

        total = 0
        chunks = []
        for chunk in resp.iter_content(chunk_size=8192):
            total += len(chunk)
            if total > max_size:
                raise ValueError("Response too large")
            chunks.append(chunk)

        return {"ok": True, "content": b"".join(chunks), "error": None}

    except requests.Timeout:
        err = "Timeout"
    except requests.ConnectionError:
        err = "Connection Error"
    except requests.RequestException as e:
        err = f"Request failed: {e}"
    except ValueError as e:
        err = str(e)

    if debug:
        print(f"[!] GET {url} failed -> {err}")

    return {"ok": False, "content": None, "error": err}


def fetch_suffix_list(url=PSL_URL, dest=None, include_private=PSL_INCLUDE_PRIVATE, debug=False):
    """
    Download the Public Suffix List and optionally save it to ``dest``.

    The text is parsed before anything is written, so a truncated or
    garbage download never replaces a good local copy.
    """
    result = {"ok": False, "url": url, "path": None, "rule_count": 0, "error": None}

    fetched = download(url, debug=debug)
    if not fetched["ok"]:
        result["error"] = fetched["error"]
        return result

    try:
        text = fetched["content"].decode("utf-8")
    except UnicodeDecodeError as e:
        result["error"] = f"Invalid encoding: {e}"
        return result

    try:
        rules = parse_suffix_list(text, include_private)
    except SuffixListError as e:
        result["error"] = str(e)
        return result

    result["rule_count"] = count_rules(rules)

    if dest:
        path = Path(dest)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(text, encoding="utf-8")
        except OSError as e:
            result["error"] = f"Failed to write {path}: {e}"
            return result
        result["path"] = str(path)

    result["ok"] = True
    return result


def count_rules(rules):
    """Number of distinct suffixes (trie nodes) in a rule table."""
    return sum(1 + count_rules(child) for label, child in rules.items() if label != EXCEPTION)
