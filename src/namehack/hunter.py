from .config import logger
from .phases.combination import combine
from .phases.filtering import filter_candidates
from .phases.probing import ProbePipeline
from .utils.output_utils import write_result
from .utils.progress import ProgressReporter
from .utils.wordlist import EmptyWordListsError
import time


class DomainHunter:
    def __init__(self, settings, resolver_factory=None, progress_stream=None):
        self.settings = settings
        self.resolver_factory = resolver_factory
        self.progress_stream = progress_stream

        self.candidates = []
        self.checked = 0
        self.available = []
        self.elapsed = 0.0

    def run(self, prefixes, suffixes, output):
        """Generates, probes and writes results for two word lists."""
        logger.info(f"\n--- Hunting names across {len(self.settings.public_suffixes)} public suffixes ---")
        logger.info(f"Public Suffixes: {', '.join(self.settings.public_suffixes)}")
        self.phase_generation(prefixes, suffixes)
        self.phase_probing(output)
        self.phase_final_reporting()
        return self.available

    def phase_generation(self, prefixes, suffixes):
        logger.info("\n--- Phase 1: Candidate Generation ---")
        if not prefixes and not suffixes:
            raise EmptyWordListsError("Empty wordlists")

        s = self.settings
        domains = combine(prefixes, suffixes, s.public_suffixes, s.single, s.hyphenate, s.itself, s.hacks, s.min_length)
        self.candidates = filter_candidates(self, domains)
        return self.candidates

    def phase_probing(self, output):
        """Aggregator: consumes exactly one result per candidate and writes the accepted ones."""
        s = self.settings
        logger.info(f"\n--- Phase 2: DNS Probing ({len(self.candidates)} names, {s.concurrency} threads) ---")
        if not self.candidates:
            logger.info("[*] Nothing to check.")
            return

        pipeline = ProbePipeline(s.dns_servers, s.concurrency, s.rdtype, resolver_factory=self.resolver_factory)
        progress = ProgressReporter(len(self.candidates), stream=self.progress_stream)
        started = time.monotonic()

        for result in pipeline.run(self.candidates):
            self.checked += 1
            logger.debug(f" [.] {result.candidate}: {result.status} via {result.nameserver}")
            if result.available:
                self.available.append(result.candidate)
            write_result(output, result, s.available_only)
            progress.update(self.checked)

        progress.finish()
        self.elapsed = time.monotonic() - started

    def phase_final_reporting(self):
        logger.info("\n--- Checks Complete ---")
        logger.info(f"  Names checked: {self.checked}")
        logger.info(f"  Available (NXDOMAIN): {len(self.available)}")
        logger.info(f"  Elapsed: {self.elapsed:.1f}s")
