#
#
#

"""
Adapter for nameserver lookups on top of dnspython.

Exposes the minimal NameserverResolver interface the client needs and
keeps dnspython's exception types from leaking past it.
"""

import logging
from typing import List, Optional, Sequence

import dns.exception
import dns.resolver

from .exceptions import DomainConnectResolutionError


class DnsPythonResolver:
    """Thin wrapper around a dnspython ``Resolver``.

    ``nameservers`` overrides the upstream servers read from the system
    configuration, ``lifetime`` bounds the total time spent per query.
    """

    def __init__(
        self,
        lifetime: float = 5.0,
        nameservers: Optional[Sequence[str]] = None,
        resolver: Optional[dns.resolver.Resolver] = None,
    ):
        self.log = logging.getLogger('DnsPythonResolver')
        if resolver is None:
            resolver = dns.resolver.Resolver(configure=not nameservers)
            if nameservers:
                resolver.nameservers = list(nameservers)
        resolver.lifetime = lifetime
        self._resolver = resolver

    def resolve_nameservers(self, domain: str) -> List[str]:
        """Return the NS targets of ``domain``, lower-cased, no trailing dot."""
        self.log.debug('resolve_nameservers: domain=%s', domain)
        try:
            answer = self._resolver.resolve(domain, 'NS')
        except dns.exception.DNSException as e:
            raise DomainConnectResolutionError(domain, e) from e

        nameservers = [
            rdata.target.to_text(omit_final_dot=True).lower()
            for rdata in answer
        ]
        self.log.debug('resolve_nameservers:   found %s', nameservers)
        return nameservers
