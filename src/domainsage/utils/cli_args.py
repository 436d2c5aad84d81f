import argparse

def get_parser():
    parser = argparse.ArgumentParser(prog="domainsage", description="DomainSage")

    # ---- SUBCOMMANDS ----
    subparsers = parser.add_subparsers(dest="mode", required=True)

    #----PARSE----
    parse_parser = subparsers.add_parser('parse',
        help='Split URLs and classify their host against the Public Suffix List')
    parse_parser.add_argument('urls', nargs='*', metavar='URL', help='URLs or bare host names')
    parse_parser.add_argument('-f', '--file', help='Newline-delimited file of URLs')
    parse_parser.add_argument('--psl', metavar='PATH', help='Local public_suffix_list.dat (default: configured path or bundled snapshot)')
    parse_parser.add_argument('--strict', action='store_true', help='Fail hosts that are themselves a public suffix')
    parse_parser.add_argument("--json", action="store_true", help='Output results in raw JSON format')

    #----UPDATE----
    update_parser = subparsers.add_parser('update',
        help='Download the Public Suffix List to a local file')
    update_parser.add_argument('--url', help='Suffix list URL (default: configured URL)')
    update_parser.add_argument('-o', '--output', metavar='PATH', help='Where to save the list (default: configured path)')
    update_parser.add_argument('--debug', action='store_true', help='Print request failures')

    return parser
