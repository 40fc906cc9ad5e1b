import threading
import time

import dns.exception
import dns.resolver
import pytest


class FakeResolver:
    """Stands in for dns.resolver.Resolver bound to one nameserver."""

    def __init__(self, server, outcomes=None, delay=0.0, tracker=None):
        self.server = server
        self.outcomes = outcomes or {}
        self.delay = delay
        self.tracker = tracker
        self.queries = []

    def resolve(self, name, rdtype):
        self.queries.append((name, rdtype))
        if self.tracker:
            self.tracker.enter()
        try:
            if self.delay:
                time.sleep(self.delay)
            outcome = self.outcomes.get(name, dns.resolver.NXDOMAIN)
            if isinstance(outcome, type) and issubclass(outcome, Exception):
                raise outcome()
            if isinstance(outcome, Exception):
                raise outcome
            return list(outcome)
        finally:
            if self.tracker:
                self.tracker.leave()


class InFlightTracker:
    def __init__(self):
        self.lock = threading.Lock()
        self.current = 0
        self.peak = 0

    def enter(self):
        with self.lock:
            self.current += 1
            self.peak = max(self.peak, self.current)

    def leave(self):
        with self.lock:
            self.current -= 1


@pytest.fixture
def resolver_factory():
    """Returns (factory, created) where created maps server -> [FakeResolver]."""
    def build(outcomes=None, delay=0.0, tracker=None):
        created = {}

        def factory(server):
            resolver = FakeResolver(server, outcomes, delay, tracker)
            created.setdefault(server, []).append(resolver)
            return resolver
        return factory, created
    return build


@pytest.fixture
def tracker():
    return InFlightTracker()
