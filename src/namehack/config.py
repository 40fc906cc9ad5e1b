import os
import sys
import logging
from dataclasses import dataclass, field
from typing import Tuple

# Public suffixes combined with every word unless --psl says otherwise
DEFAULT_PUBLIC_SUFFIXES = "com,net,org,info,biz,in,us,me,co,ca,mobi,de,eu,ws,tk,es,it,nl,be"

# Public resolvers (Google, Level3, Verisign, misc.)
DEFAULT_DNS_SERVERS = ",".join([
    '8.8.8.8', '8.8.4.4',
    '4.2.2.1', '4.2.2.2', '4.2.2.3', '4.2.2.4', '4.2.2.5', '4.2.2.6',
    '198.153.192.1', '198.153.194.1',
    '67.138.54.100', '207.225.209.66',
])

DEFAULT_CONCURRENCY = 10
DEFAULT_MAX_LENGTH = 64
DEFAULT_MIN_LENGTH = 3
DEFAULT_RDTYPE = 'NS'
PROGRESS_EVERY = 10

PUBLIC_SUFFIX_LIST_URL = "https://publicsuffix.org/list/public_suffix_list.dat"

# Logger setup (can be customized)
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(levelname)s - %(message)s',
    handlers=[logging.StreamHandler(sys.stdout)]
)
logger = logging.getLogger("namehack")


def load_env_defaults():
    """CSV defaults, overridable from the environment."""
    return {
        'psl': os.getenv('NAMEHACK_PSL', DEFAULT_PUBLIC_SUFFIXES),
        'dns': os.getenv('NAMEHACK_DNS', DEFAULT_DNS_SERVERS),
    }


@dataclass(frozen=True)
class Settings:
    """Run configuration, built once and handed to every phase."""
    public_suffixes: Tuple[str, ...] = ()
    dns_servers: Tuple[str, ...] = ()
    single: bool = False
    itself: bool = False
    hyphenate: bool = False
    hacks: bool = False
    skip_utf8: bool = True
    strict: bool = True
    available_only: bool = True
    max_length: int = DEFAULT_MAX_LENGTH
    min_length: int = DEFAULT_MIN_LENGTH
    concurrency: int = DEFAULT_CONCURRENCY
    rdtype: str = DEFAULT_RDTYPE
    accepted_suffixes: frozenset = field(default_factory=frozenset)

    @classmethod
    def from_args(cls, args, public_suffixes, dns_servers, accepted_suffixes):
        return cls(
            public_suffixes=tuple(public_suffixes),
            dns_servers=tuple(dns_servers),
            single=args.single,
            itself=args.itself,
            hyphenate=args.hyphenate,
            hacks=args.hacks,
            skip_utf8=args.skip_utf8,
            strict=args.strict,
            available_only=args.available,
            max_length=args.max_length,
            min_length=args.min_length,
            concurrency=args.concurrency,
            rdtype=args.rdtype,
            accepted_suffixes=frozenset(accepted_suffixes),
        )
