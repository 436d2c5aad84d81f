import json
import sys
from domainsage.config.loader import PSL_PATH, PSL_URL, STRICT
from domainsage.suffix.rules import default_rule_table, load_rule_table
from domainsage.utils.api_clients import fetch_suffix_list
from domainsage.utils.cli_args import get_parser
from domainsage.utils.errors import DomainSageError, SuffixListError
from domainsage.utils.url_parser import UrlParser


def read_urls(args):
    urls = list(args.urls)

    if args.file:
        with open(args.file, "r", encoding="utf-8") as f:
            urls.extend(line.strip() for line in f if line.strip())

    return urls


def print_parsed(parsed):
    print(f"URL: {parsed.url}")
    print(f" ↳ Scheme: {parsed.scheme or '-'}")
    print(f" ↳ Host: {parsed.host}")
    print(f" ↳ Subdomain: {parsed.subdomain or '-'}")
    print(f" ↳ Registrable Domain: {parsed.registerable_domain}")
    print(f" ↳ Public Suffix: {parsed.public_suffix or '-'}")
    print(f" ↳ Path: {parsed.path or '-'}")
    print()


def handle_parse(args):
    try:
        urls = read_urls(args)
    except OSError as e:
        print(f"[!] Failed to read URL file: {e}")
        return 1

    if not urls:
        print("[!] No URLs given. Pass them as arguments or use --file <path>")
        return 1

    try:
        rules = load_rule_table(args.psl) if args.psl else default_rule_table()
    except SuffixListError as e:
        print(f"[!] {e}")
        return 1

    parser = UrlParser(rules=rules, strict=args.strict or STRICT)

    results = []
    failed = 0
    for url in urls:
        try:
            results.append(parser.parse(url))
        except DomainSageError as e:
            failed += 1
            results.append({"url": url, "error": type(e).__name__, "message": str(e)})

    if args.json:
        records = [r if isinstance(r, dict) else r.as_dict() for r in results]
        print(json.dumps(records, indent=2, sort_keys=False))
        return 1 if failed else 0

    print(f"\n🌐 Domain Breakdown — {len(urls)} URL(s)\n" + "=" * 60)
    for result in results:
        if isinstance(result, dict):
            print(f"[!] {result['url']}: {result['message']}\n")
            continue
        print_parsed(result)

    return 1 if failed else 0


def handle_update(args):
    url = args.url or PSL_URL
    dest = args.output or PSL_PATH

    if not dest:
        print("[!] No output path. Use --output <path> or set DOMAINSAGE_PSL_PATH")
        return 1

    print(f"\n📥 Updating Public Suffix List → {dest}\n" + "=" * 60)
    result = fetch_suffix_list(url=url, dest=dest, debug=args.debug)

    if not result["ok"]:
        print(f"[!] Update failed for {url}: {result['error']}")
        return 1

    print(f"[i] Saved {result['rule_count']} suffixes from {url} to {result['path']}")
    return 0


def main(argv=None):
    parser = get_parser()
    args = parser.parse_args(argv)

    if args.mode == "parse":
        return handle_parse(args)
    elif args.mode == "update":
        return handle_update(args)

    print(f"[!] Unknown mode: {args.mode}")
    return 1


if __name__ == "__main__":
    sys.exit(main())
