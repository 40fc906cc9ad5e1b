from ..config import logger, DEFAULT_RDTYPE
from ..utils import dns_utils
from ..utils.dns_utils import ProbeResult, NoResolversError
import queue
import threading

_DONE = None


def bind_resolvers(servers, workers):
    """Round-robin binding: worker i talks to servers[i % len(servers)]."""
    if not servers:
        raise NoResolversError("You need to specify a DNS server")
    return [servers[i % len(servers)] for i in range(workers)]


class ProbePipeline:
    """
    Dispatcher -> N bound workers -> aggregator.

    The dispatcher feeds candidates through a one-slot pending queue in
    generation order. Each worker owns one resolver for its whole life and
    emits exactly one ProbeResult per candidate. The aggregator (the caller
    iterating `run`) stops after len(candidates) results.
    """

    def __init__(self, servers, concurrency, rdtype=DEFAULT_RDTYPE, resolver_factory=None, lookup=None):
        if concurrency < 1:
            raise ValueError("concurrency must be at least 1")
        self.servers = list(servers)
        self.concurrency = concurrency
        self.rdtype = rdtype
        self.resolver_factory = resolver_factory or dns_utils.build_resolver
        self.lookup = lookup or dns_utils.lookup
        self.bindings = bind_resolvers(self.servers, concurrency)

    def _dispatch(self, pending, candidates):
        for candidate in candidates:
            pending.put(candidate)
        for _ in range(self.concurrency):
            pending.put(_DONE)

    def _work(self, pending, complete, resolver, server):
        while True:
            candidate = pending.get()
            if candidate is _DONE:
                return
            try:
                result = self.lookup(resolver, candidate, self.rdtype, server)
            except Exception as e:
                # One result per candidate, whatever happens
                logger.debug(f" [!] Lookup of {candidate} via {server} failed: {e}")
                result = ProbeResult(candidate, False, 'ERROR', (), str(e), server)
            complete.put(result)

    def run(self, candidates):
        """Yields one ProbeResult per candidate, in completion order."""
        candidates = list(candidates)
        expected = len(candidates)
        if expected == 0:
            return

        pending = queue.Queue(maxsize=1)
        complete = queue.Queue()

        # Resolvers are built up front so a bad address fails before any work starts
        resolvers = [self.resolver_factory(server) for server in self.bindings]

        threads = [threading.Thread(target=self._dispatch, args=(pending, candidates),
                                    name="namehack-dispatcher", daemon=True)]
        for i, (server, resolver) in enumerate(zip(self.bindings, resolvers)):
            threads.append(threading.Thread(target=self._work, args=(pending, complete, resolver, server),
                                            name=f"namehack-worker-{i}", daemon=True))
        for t in threads:
            t.start()

        for _ in range(expected):
            yield complete.get()
