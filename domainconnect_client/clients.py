#
#
#

"""Protocol definitions for the client's external collaborators.

This module defines structural typing (PEP 544) for the HTTP transport,
the nameserver resolver and the provider directory, so test doubles and
alternative implementations can be injected without inheritance.
"""

from typing import Any, Iterable, List, NamedTuple, Optional, Protocol

from .models import DnsProvider


class HttpResponse(NamedTuple):
    """Outcome of a completed HTTP exchange.

    ``body`` is the decoded JSON document, or None when the response had
    no body or the body was not JSON.
    """

    status: int
    body: Any = None


class HttpClient(Protocol):
    """Protocol for the transport used to talk to Domain Connect APIs."""

    def get(self, url: str) -> HttpResponse:
        """Issue a GET request.

        Args:
            url: Absolute URL, query string included

        Returns:
            HttpResponse for any status code

        Raises:
            DomainConnectTransportError: If no response was received
        """
        ...


class NameserverResolver(Protocol):
    """Protocol for looking up the authoritative nameservers of a domain."""

    def resolve_nameservers(self, domain: str) -> List[str]:
        """Resolve NS records.

        Args:
            domain: Domain name (without trailing dot)

        Returns:
            Nameserver host names without trailing dots

        Raises:
            DomainConnectResolutionError: If resolution fails
        """
        ...


class ProviderDirectory(Protocol):
    """Protocol for the read only directory of known DNS hosts."""

    def providers(self) -> List[DnsProvider]:
        """All entries, in priority order."""
        ...

    def get(self, name: str) -> Optional[DnsProvider]:
        """Entry by provider name."""
        ...

    def lookup(self, nameserver: str) -> Optional[DnsProvider]:
        """Entry serving a single nameserver."""
        ...

    def match(self, nameservers: Iterable[str]) -> Optional[DnsProvider]:
        """First entry, in priority order, serving any of ``nameservers``."""
        ...
