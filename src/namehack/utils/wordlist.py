from ..config import logger


class EmptyWordListsError(ValueError):
    pass


def load_wordlist(path):
    """Loads newline separated words, dropping blanks and repeats. Case is kept."""
    words = []
    seen = set()
    with open(path, 'r', encoding='utf-8') as f:
        for line in f:
            word = line.strip()
            if word and word not in seen:
                seen.add(word)
                words.append(word)
    logger.debug(f" [.] Loaded {len(words)} words from {path}.")
    return words
