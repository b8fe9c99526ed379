#
#
#

import logging
from typing import List, Optional, Sequence

from pydantic import ValidationError

from .config import DomainConnectConfig
from .exceptions import (
    DomainConnectConfigError,
    DomainConnectException,
    DomainConnectResolutionError,
    DomainConnectTransportError,
)
from .hostnames import parse_redirect_uri, split_hostname, to_punycode
from .models import (
    DnsProvider,
    DnsProviderInfo,
    DomainConnectOptions,
    DomainConnectResult,
    DomainConnectSettings,
    Template,
    TemplateParameter,
    TemplateRecord,
)
from .providers import StaticProviderDirectory, identify_provider
from .strategies import DEFAULT_STRATEGIES, discover
from .templates import resolve_records, substitute, validate_parameters
from .urls import (
    build_async_url,
    build_sync_url,
    format_settings,
    support_check_url,
    template_url,
)

__version__ = '1.0.0'

__all__ = [
    'DomainConnectClient',
    'DomainConnectConfig',
    'DomainConnectConfigError',
    'DomainConnectException',
    'DomainConnectResolutionError',
    'DomainConnectTransportError',
    'DnsProvider',
    'DnsProviderInfo',
    'DomainConnectOptions',
    'DomainConnectResult',
    'DomainConnectSettings',
    'Template',
    'TemplateParameter',
    'TemplateRecord',
    'build_async_url',
    'build_sync_url',
    'format_settings',
    'identify_provider',
    'parse_redirect_uri',
    'resolve_records',
    'split_hostname',
    'substitute',
    'to_punycode',
    'validate_parameters',
]

UNKNOWN_PROVIDER = 'Unknown'

SYNC_NOT_SUPPORTED = 'Synchronous mode not supported by DNS provider'
ASYNC_NOT_SUPPORTED = 'Asynchronous mode not supported by DNS provider'
IN_PROGRESS = 'Operation still in progress'


def _failure(error):
    return DomainConnectResult(success=False, error=error)


def _unexpected(status):
    return _failure(f'Unexpected status code: {status}')


class DomainConnectClient(object):
    """Discovers Domain Connect settings and applies templates.

    The HTTP transport, nameserver resolver, provider directory and
    discovery strategies are all injectable; anything not supplied is
    built from ``config``.
    """

    def __init__(
        self,
        config=None,
        http_client=None,
        resolver=None,
        directory=None,
        strategies: Optional[Sequence] = None,
    ):
        self.log = logging.getLogger('DomainConnectClient')
        self.config = self._create_config(config)
        self.log.debug(
            '__init__: timeout=%s, dns_lifetime=%s',
            self.config.timeout,
            self.config.dns_lifetime,
        )

        self._http = http_client or self._create_http_client()
        # Built on first use, dnspython is only needed for provider lookups
        self._resolver = resolver
        self._directory = directory or StaticProviderDirectory()
        self._strategies = tuple(
            DEFAULT_STRATEGIES if strategies is None else strategies
        )

    def _create_config(self, config) -> DomainConnectConfig:
        if isinstance(config, DomainConnectConfig):
            return config
        try:
            return DomainConnectConfig.model_validate(config or {})
        except ValidationError as e:
            raise DomainConnectConfigError(
                f'Invalid DomainConnectClient config: {e}'
            ) from e

    def _create_http_client(self):
        from .http_client import RequestsHttpClient

        return RequestsHttpClient(
            timeout=self.config.timeout, user_agent=self.config.user_agent
        )

    def _create_resolver(self):
        from .dns_resolver import DnsPythonResolver

        return DnsPythonResolver(
            lifetime=self.config.dns_lifetime,
            nameservers=self.config.nameservers,
        )

    @property
    def resolver(self):
        if self._resolver is None:
            self._resolver = self._create_resolver()
        return self._resolver

    # --- Provider directory -----------------------------------------------

    def get_all_dns_providers(self) -> List[DnsProvider]:
        return self._directory.providers()

    def get_provider_login_url(self, provider: str) -> Optional[str]:
        entry = self._directory.get(provider)
        return entry.login_url if entry else None

    def get_provider_icon_url(self, provider: str) -> Optional[str]:
        entry = self._directory.get(provider)
        return entry.icon_url if entry else None

    def get_provider_cname_instructions(self, provider: str) -> Optional[str]:
        entry = self._directory.get(provider)
        return entry.cname_instructions if entry else None

    def identify_dns_provider(
        self, nameservers: Sequence[str]
    ) -> Optional[str]:
        return identify_provider(nameservers, self._directory)

    def get_dns_provider(self, domain: str) -> DnsProviderInfo:
        """Work out which DNS host serves ``domain``.

        Resolution failures are reported in the returned info's ``error``
        rather than raised.
        """
        self.log.debug('get_dns_provider: domain=%s', domain)
        try:
            nameservers = self.resolver.resolve_nameservers(domain)
        except Exception as e:
            self.log.warning(
                'get_dns_provider: nameserver lookup failed for %s: %s',
                domain,
                e,
            )
            return DnsProviderInfo(
                domain=domain, provider=UNKNOWN_PROVIDER, error=str(e)
            )

        name = self.identify_dns_provider(nameservers)
        entry = self._directory.get(name) if name else None
        self.log.info(
            'get_dns_provider:   domain=%s, provider=%s, known=%s',
            domain,
            name,
            entry is not None,
        )
        return DnsProviderInfo(
            domain=domain,
            nameservers=tuple(nameservers),
            provider=name or UNKNOWN_PROVIDER,
            login_url=entry.login_url if entry else None,
            icon_url=entry.icon_url if entry else None,
            cname_instructions=entry.cname_instructions if entry else None,
        )

    # --- Discovery --------------------------------------------------------

    def discover_settings(
        self, domain: str
    ) -> Optional[DomainConnectSettings]:
        self.log.debug('discover_settings: domain=%s', domain)
        settings = discover(self._strategies, self._http, domain)
        if settings is None:
            self.log.info(
                'discover_settings: no Domain Connect settings for %s', domain
            )
        return settings

    def supports_domain_connect(self, domain: str) -> bool:
        try:
            response = self._http.get(support_check_url(domain))
        except Exception as e:
            self.log.debug('supports_domain_connect: %s: %s', domain, e)
            return False
        return response.status == 200

    def get_template(
        self,
        settings: DomainConnectSettings,
        provider_id: str,
        service_id: str,
    ) -> Optional[Template]:
        url = template_url(settings.url_api, provider_id, service_id)
        self.log.debug('get_template: url=%s', url)
        try:
            response = self._http.get(url)
        except Exception as e:
            self.log.error('get_template: request failed for %s: %s', url, e)
            return None

        if response.status != 200 or not response.body:
            self.log.warning(
                'get_template: no template at %s, status=%d',
                url,
                response.status,
            )
            return None

        try:
            return Template.model_validate(response.body)
        except ValidationError as e:
            self.log.error('get_template: invalid template at %s: %s', url, e)
            return None

    # --- Apply ------------------------------------------------------------

    def generate_sync_url(
        self, settings: DomainConnectSettings, options: DomainConnectOptions
    ) -> str:
        return build_sync_url(settings, options)

    def generate_async_url(
        self, settings: DomainConnectSettings, options: DomainConnectOptions
    ) -> Optional[str]:
        return build_async_url(settings, options)

    def apply_template_synchronous(
        self, settings: DomainConnectSettings, options: DomainConnectOptions
    ) -> DomainConnectResult:
        if not settings.sync_enabled:
            return _failure(SYNC_NOT_SUPPORTED)

        url = build_sync_url(settings, options)
        self.log.debug('apply_template_synchronous: url=%s', url)
        try:
            response = self._http.get(url)
        except Exception as e:
            self.log.error(
                'apply_template_synchronous: request failed for %s: %s',
                options.domain,
                e,
            )
            return _failure(str(e))

        if response.status == 200:
            self.log.info(
                'apply_template_synchronous: applied %s/%s to %s',
                options.provider_id,
                options.service_id,
                options.domain,
            )
            return DomainConnectResult(success=True)
        return _unexpected(response.status)

    def apply_template_asynchronous(
        self, settings: DomainConnectSettings, options: DomainConnectOptions
    ) -> DomainConnectResult:
        """Prepare the consent redirect for the asynchronous flow.

        No request is made, the caller sends the user to ``redirect_url``.
        """
        url = build_async_url(settings, options)
        if url is None:
            return _failure(ASYNC_NOT_SUPPORTED)
        self.log.debug('apply_template_asynchronous: redirect=%s', url)
        return DomainConnectResult(success=True, redirect_url=url)

    def check_async_status(self, status_url: str) -> DomainConnectResult:
        self.log.debug('check_async_status: url=%s', status_url)
        try:
            response = self._http.get(status_url)
        except Exception as e:
            self.log.error('check_async_status: request failed: %s', e)
            return _failure(str(e))

        if response.status == 200:
            return DomainConnectResult(success=True)
        if response.status == 202:
            return _failure(IN_PROGRESS)
        return _unexpected(response.status)
