#
#
#

"""URL construction for the Domain Connect endpoints.

Everything here is pure: the same settings and options always produce
the same URL, byte for byte.
"""

from typing import Optional, Sequence, Tuple
from urllib.parse import urlencode

from .models import DomainConnectOptions, DomainConnectSettings
from .templates import format_value

TEMPLATES_PATH = '/v2/domainTemplates/providers'


def discovery_url(domain: str) -> str:
    return f'https://_domainconnect.{domain}{TEMPLATES_PATH}'


def well_known_url(domain: str) -> str:
    return f'https://{domain}/.well-known/domain-connect.json'


def support_check_url(domain: str) -> str:
    return f'https://_domainconnect.{domain}/.well-known/domain-connect.json'


def template_url(base: str, provider_id: str, service_id: str) -> str:
    return f'{base}{TEMPLATES_PATH}/{provider_id}/services/{service_id}'


def apply_url(base: str, provider_id: str, service_id: str) -> str:
    return f'{template_url(base, provider_id, service_id)}/apply'


def _query(
    options: DomainConnectOptions, extra: Sequence[Tuple[str, str]] = ()
) -> str:
    query = [('domain', options.domain)]
    if options.host:
        query.append(('host', options.host))
    query.extend(extra)
    query.extend((k, format_value(v)) for k, v in options.params.items())
    return urlencode(query)


def build_sync_url(
    settings: DomainConnectSettings, options: DomainConnectOptions
) -> str:
    base = apply_url(settings.url_api, options.provider_id, options.service_id)
    return f'{base}?{_query(options)}'


def build_async_url(
    settings: DomainConnectSettings, options: DomainConnectOptions
) -> Optional[str]:
    """Build the consent URL the user is redirected to.

    Returns ``None`` when the provider does not support the asynchronous
    flow.
    """
    if not settings.async_enabled or not settings.url_async_api:
        return None

    extra = []
    if options.redirect_uri:
        extra.append(('redirect_uri', options.redirect_uri))
    if options.state:
        extra.append(('state', options.state))
    if options.force_permission:
        extra.append(('force', 'true'))

    base = apply_url(
        settings.url_async_api, options.provider_id, options.service_id
    )
    return f'{base}?{_query(options, extra)}'


def format_settings(domain: str, **overrides) -> DomainConnectSettings:
    """Default settings for a provider hosted at ``api.domainconnect.<domain>``.

    Keyword overrides use either the field names or the protocol aliases.
    """
    default = f'https://api.domainconnect.{domain}'
    data = {
        'url_api': default,
        'sync_enabled': True,
        'async_enabled': True,
        'url_async_api': default,
    }
    fields = DomainConnectSettings.model_fields
    aliases = {f.alias: name for name, f in fields.items() if f.alias}
    for key, value in overrides.items():
        data[aliases.get(key, key)] = value
    return DomainConnectSettings.model_validate(data)
