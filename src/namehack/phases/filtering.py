from ..config import logger


def filter_max_length(domains, max_length):
    return [d for d in domains if len(d) <= max_length]


def filter_strict_domains(domains, accepted):
    """Drops names whose first label is itself a public suffix (co.com.br)."""
    return [d for d in domains if d.split('.', 1)[0] not in accepted]


def filter_non_ascii(items):
    return [i for i in items if i.isascii()]


def remove_duplicates(items):
    seen = set()
    unique = []
    for item in items:
        if item not in seen:
            seen.add(item)
            unique.append(item)
    return unique


def filter_candidates(self, domains):
    """Runs the candidate filters in order for a hunter's settings."""
    settings = self.settings
    initial = len(domains)
    if settings.skip_utf8:
        domains = filter_non_ascii(domains)
    domains = filter_max_length(domains, settings.max_length)
    if settings.strict:
        domains = filter_strict_domains(domains, settings.accepted_suffixes)
    domains = remove_duplicates(domains)
    logger.info(f"[*] Filtering kept {len(domains)} of {initial} generated names.")
    return domains
