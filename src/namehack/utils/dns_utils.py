from ..config import logger
from dataclasses import dataclass
from typing import Optional, Tuple
import dns.exception
import dns.inet
import dns.resolver

NXDOMAIN = 'NXDOMAIN'


class NoResolversError(ValueError):
    pass


@dataclass(frozen=True)
class ProbeResult:
    candidate: str
    resolved: bool
    status: str
    addresses: Tuple[str, ...] = ()
    error: Optional[str] = None
    nameserver: Optional[str] = None

    @property
    def available(self):
        return self.status == NXDOMAIN


def parse_dns_servers(csv):
    servers = [s.strip() for s in csv.split(',') if s.strip()]
    if not servers:
        raise NoResolversError("You need to specify a DNS server")
    for server in servers:
        try:
            host, _ = split_server(server)
        except ValueError:
            raise NoResolversError(f"Invalid DNS server: {server!r}")
        if not dns.inet.is_address(host):
            raise NoResolversError(f"Invalid DNS server: {server!r}")
    return servers


def split_server(server):
    """'1.2.3.4:5353' -> ('1.2.3.4', 5353). IPv6 addresses never carry a port."""
    if server.count(':') == 1:
        host, port = server.split(':')
        return host, int(port)
    return server, 53


def build_resolver(server):
    # configure=False keeps /etc/resolv.conf out of the picture
    resolver = dns.resolver.Resolver(configure=False)
    host, port = split_server(server)
    # port first: dnspython binds it to each nameserver on assignment
    resolver.port = port
    resolver.nameservers = [host]
    return resolver


def lookup(resolver, candidate, rdtype, nameserver=None):
    """
    Performs one resolution of `candidate` and classifies the outcome. Only
    NXDOMAIN marks a name as available; every other answer or failure is
    reported as observed.
    """
    try:
        answers = resolver.resolve(candidate, rdtype)
        addresses = tuple(str(a).rstrip('.') for a in answers)
        return ProbeResult(candidate, True, 'NOERROR', addresses, None, nameserver)
    except dns.resolver.NXDOMAIN:
        return ProbeResult(candidate, False, NXDOMAIN, (), None, nameserver)
    except dns.resolver.NoAnswer:
        return ProbeResult(candidate, False, 'NOERROR', (), "no answer", nameserver)
    except dns.resolver.YXDOMAIN as e:
        return ProbeResult(candidate, False, 'YXDOMAIN', (), str(e), nameserver)
    except dns.resolver.NoNameservers as e:
        return ProbeResult(candidate, False, 'SERVFAIL', (), str(e), nameserver)
    except dns.exception.Timeout as e:
        return ProbeResult(candidate, False, 'TIMEOUT', (), str(e), nameserver)
    except dns.exception.DNSException as e:
        logger.debug(f"Error resolving {rdtype} for {candidate}: {e}")
        return ProbeResult(candidate, False, 'ERROR', (), str(e), nameserver)
