from ..config import logger


def fuse(left, right):
    """
    Collapses every proper overlap between the tail of `left` and the head of
    `right`, longest overlap first. Each fused form keeps at least one
    character of both words; the plain concatenation is not included.

        fuse("flamingo", "gorilla") -> ["flamingorilla"]
    """
    fused = []
    for size in range(min(len(left), len(right)) - 1, 0, -1):
        if left[-size:] == right[:size]:
            word = left + right[size:]
            if word not in fused:
                fused.append(word)
    return fused


def combine_phrase_and_public_suffixes(phrase, public_suffixes, hacks, min_length=0):
    """
    Appends each public suffix to phrase. With hacks enabled, a phrase ending
    in the suffix letters also yields the hack form (index + ex -> ind.ex),
    provided the shortened local part is still at least min_length long and
    does not end in a hyphen.
    """
    domains = []
    for psl in public_suffixes:
        domains.append(f"{phrase}.{psl}")
        if hacks:
            tail = psl.replace('.', '')
            if len(phrase) > len(tail) and phrase.endswith(tail):
                local = phrase[:-len(tail)]
                if len(local) >= min_length and not local.endswith('-'):
                    domains.append(f"{local}.{psl}")
    return domains


def combine_prefix_and_suffix(prefix, suffix, itself, hyphenate, fusion, min_length):
    if prefix == suffix and not itself:
        return []

    phrases = [prefix + suffix]
    if fusion:
        for word in fuse(prefix, suffix):
            if word not in phrases:
                phrases.append(word)
    if hyphenate:
        phrases.append(f"{prefix}-{suffix}")

    return [p for p in phrases if len(p) >= min_length]


def combine(prefixes, suffixes, public_suffixes, single, hyphenate, itself, hacks, min_length):
    """
    Builds every candidate domain for the word lists. Single words ignore
    min_length; duplicates are left for the filtering phase.
    """
    domains = []

    if single:
        for word in list(prefixes) + list(suffixes):
            if not word:
                continue
            domains.extend(combine_phrase_and_public_suffixes(word, public_suffixes, hacks))

    for prefix in prefixes:
        if not prefix:
            continue
        for suffix in suffixes:
            if not suffix:
                continue
            for phrase in combine_prefix_and_suffix(prefix, suffix, itself, hyphenate, hacks, min_length):
                domains.extend(combine_phrase_and_public_suffixes(phrase, public_suffixes, hacks, min_length))

    logger.debug(f" [.] Combined {len(prefixes)} prefixes and {len(suffixes)} suffixes into {len(domains)} raw candidates.")
    return domains
