import argparse
import logging
import sys

import requests

from .config import (logger, load_env_defaults, Settings, DEFAULT_MAX_LENGTH, DEFAULT_MIN_LENGTH,
                     DEFAULT_CONCURRENCY, DEFAULT_RDTYPE, PUBLIC_SUFFIX_LIST_URL)
from . import __version__
from .hunter import DomainHunter
from .phases.filtering import filter_non_ascii, remove_duplicates
from .suffixes import PUBLIC_SUFFIXES, UnknownSuffixError, parse_public_suffix_csv, known_tlds
from .utils.dns_utils import NoResolversError, parse_dns_servers
from .utils.http_utils import fetch_public_suffix_list
from .utils.wordlist import load_wordlist

EXIT_USAGE = 1
EXIT_WRITE = 6
EXIT_PREFIXES = 10
EXIT_SUFFIXES = 11
EXIT_EMPTY_WORDLISTS = 12
EXIT_PSL = 20
EXIT_PSL_FETCH = 21
EXIT_DNS = 30
EXIT_OUTPUT = 40


class UsageExitParser(argparse.ArgumentParser):
    def error(self, message):
        self.print_usage(sys.stderr)
        sys.stderr.write(f"Error: {message}\n")
        sys.exit(EXIT_USAGE)


def show_error_and_exit(err, code):
    sys.stderr.write(f"Error: {err}\n")
    sys.exit(code)


def build_parser():
    env = load_env_defaults()
    parser = UsageExitParser(prog="namehack",
                             description="Combine word lists with public suffixes and find unregistered domain names.",
                             formatter_class=argparse.RawTextHelpFormatter)
    parser.add_argument("prefixes", help="Prefix word list (one word per line)")
    parser.add_argument("suffixes", help="Suffix word list (one word per line)")
    parser.add_argument("output", help="Output file")
    parser.add_argument("-s", "--single", action="store_true", help="Also check single words")
    parser.add_argument("-i", "--itself", action="store_true", help="Include words combined with itself")
    parser.add_argument("-H", "--hyphenate", action="store_true", help="Include hyphenated combinations")
    parser.add_argument("-k", "--hacks", action="store_true", help="Enable domain hacks and word fusion")
    parser.add_argument("--tlds", action="store_true", help="Include all known TLDs in the public suffix list")
    parser.add_argument("--no-utf8", action="store_true", dest="skip_utf8", default=True,
                        help="Skip combinations with non-ASCII characters (default)")
    parser.add_argument("--allow-utf8", action="store_false", dest="skip_utf8",
                        help="Keep combinations with non-ASCII characters")
    parser.add_argument("--psl", default=env['psl'],
                        help=f"Comma-separated public suffixes to combine with (default: {env['psl']})")
    parser.add_argument("--allow-unknown-psl", action="store_true",
                        help="Accept public suffixes missing from the known list")
    parser.add_argument("--update-psl", action="store_true",
                        help=f"Merge the current public suffix list from {PUBLIC_SUFFIX_LIST_URL}")
    parser.add_argument("--dns", default=env['dns'], help="Comma-separated list of DNS servers to talk to")
    parser.add_argument("-L", "--max-length", type=int, default=DEFAULT_MAX_LENGTH,
                        help=f"Maximum length of generated domains including public suffix (default: {DEFAULT_MAX_LENGTH})")
    parser.add_argument("-l", "--min-length", type=int, default=DEFAULT_MIN_LENGTH,
                        help=f"Minimum length of generated domains without public suffix (default: {DEFAULT_MIN_LENGTH})")
    parser.add_argument("-c", "--concurrency", type=int, default=DEFAULT_CONCURRENCY,
                        help=f"Number of concurrent threads doing checks (default: {DEFAULT_CONCURRENCY})")
    parser.add_argument("--rdtype", default=DEFAULT_RDTYPE, help=f"DNS record type to query (default: {DEFAULT_RDTYPE})")
    parser.add_argument("--avail", action="store_true", dest="available", default=True,
                        help="Output only available domains (NXDOMAIN) without DNS status (default)")
    parser.add_argument("--all", action="store_false", dest="available",
                        help="Output every checked domain with its DNS status")
    parser.add_argument("--strict", action="store_true", dest="strict", default=True,
                        help="Filter possibly prohibited domains, e.g. domain == tld (default)")
    parser.add_argument("--no-strict", action="store_false", dest="strict", help="Disable the strict filter")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable verbose logging (display debug messages).")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def resolve_public_suffixes(args):
    accepted = set(PUBLIC_SUFFIXES)
    if args.update_psl:
        try:
            accepted |= fetch_public_suffix_list()
        except requests.RequestException as e:
            show_error_and_exit(e, EXIT_PSL_FETCH)

    try:
        psl = parse_public_suffix_csv(args.psl, accepted, args.allow_unknown_psl)
    except UnknownSuffixError as e:
        show_error_and_exit(e, EXIT_PSL)
    if args.tlds:
        psl = remove_duplicates(psl + known_tlds(accepted))
    if args.skip_utf8:
        psl = filter_non_ascii(psl)
    if not psl:
        show_error_and_exit("No public suffixes to combine with", EXIT_PSL)
    return psl, accepted


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logger.setLevel(logging.DEBUG)
    else:
        logger.setLevel(logging.INFO)

    if args.concurrency < 1:
        parser.error("concurrency must be at least 1")

    logger.info("Loading word lists...")
    try:
        prefixes = load_wordlist(args.prefixes)
    except (OSError, UnicodeDecodeError) as e:
        show_error_and_exit(e, EXIT_PREFIXES)
    try:
        suffixes = load_wordlist(args.suffixes)
    except (OSError, UnicodeDecodeError) as e:
        show_error_and_exit(e, EXIT_SUFFIXES)

    if not prefixes and not suffixes:
        show_error_and_exit("Empty wordlists", EXIT_EMPTY_WORDLISTS)

    psl, accepted = resolve_public_suffixes(args)

    try:
        dns_servers = parse_dns_servers(args.dns)
    except NoResolversError as e:
        show_error_and_exit(e, EXIT_DNS)

    settings = Settings.from_args(args, psl, dns_servers, accepted)

    try:
        output = open(args.output, 'w', encoding='utf-8')
    except OSError as e:
        show_error_and_exit(e, EXIT_OUTPUT)

    with output:
        try:
            DomainHunter(settings).run(prefixes, suffixes, output)
        except OSError as e:
            show_error_and_exit(e, EXIT_WRITE)
    return 0


if __name__ == "__main__":
    main()
