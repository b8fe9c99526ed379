#
#
#

"""Discovery strategies for locating a domain's Domain Connect settings.

Each strategy knows one place the settings may be published. They are
tried in order and the first one that produces settings wins, so adding
a new location means adding a strategy, not another branch.
"""

import logging
from typing import Optional, Protocol, Sequence

from pydantic import ValidationError

from .clients import HttpClient
from .models import DomainConnectSettings
from .urls import discovery_url, well_known_url

log = logging.getLogger('DomainConnectDiscovery')


class DiscoveryStrategy(Protocol):
    """Protocol for a single settings discovery attempt."""

    name: str

    def discover(
        self, client: HttpClient, domain: str
    ) -> Optional[DomainConnectSettings]:
        """Attempt discovery.

        Args:
            client: HTTP collaborator
            domain: Domain the settings are wanted for

        Returns:
            Settings, or None when this location has none. Failures are
            logged and reported as None, never raised.
        """
        ...


class JsonEndpointStrategy:
    """Fetch the settings document from a fixed URL derived from the domain."""

    name = 'json-endpoint'

    def url_for(self, domain: str) -> str:
        raise NotImplementedError

    def discover(
        self, client: HttpClient, domain: str
    ) -> Optional[DomainConnectSettings]:
        url = self.url_for(domain)
        try:
            response = client.get(url)
        except Exception as e:
            log.info('discover: %s failed for %s: %s', self.name, url, e)
            return None

        if response.status != 200 or not response.body:
            log.info(
                'discover: %s got status=%d without settings from %s',
                self.name,
                response.status,
                url,
            )
            return None

        try:
            return DomainConnectSettings.model_validate(response.body)
        except ValidationError as e:
            log.info(
                'discover: %s returned invalid settings from %s: %s',
                self.name,
                url,
                e,
            )
            return None


class DomainConnectSubdomainStrategy(JsonEndpointStrategy):
    """Settings served by the ``_domainconnect`` host of the domain."""

    name = '_domainconnect'

    def url_for(self, domain: str) -> str:
        return discovery_url(domain)


class WellKnownStrategy(JsonEndpointStrategy):
    """Settings served from ``/.well-known/`` on the domain itself."""

    name = 'well-known'

    def url_for(self, domain: str) -> str:
        return well_known_url(domain)


DEFAULT_STRATEGIES = (DomainConnectSubdomainStrategy(), WellKnownStrategy())


def discover(
    strategies: Sequence[DiscoveryStrategy], client: HttpClient, domain: str
) -> Optional[DomainConnectSettings]:
    for strategy in strategies:
        settings = strategy.discover(client, domain)
        if settings is not None:
            log.debug(
                'discover: %s found settings for %s', strategy.name, domain
            )
            return settings
    return None
