from ..config import logger, PUBLIC_SUFFIX_LIST_URL
from ..suffixes import parse_public_suffix_list
import requests

USER_AGENT = 'namehack/0.1 (+https://github.com/exfil0/namehack)'


def get_session():
    session = requests.Session()
    session.headers.update({'User-Agent': USER_AGENT})
    return session


def fetch_public_suffix_list(url=PUBLIC_SUFFIX_LIST_URL, timeout=30):
    """Downloads and parses the ICANN section of the Public Suffix List."""
    logger.info(f"[*] Fetching public suffix list from {url}...")
    session = get_session()
    response = session.get(url, timeout=timeout)
    response.raise_for_status()
    suffixes = parse_public_suffix_list(response.text)
    logger.info(f"[*] Loaded {len(suffixes)} public suffixes.")
    return suffixes
