#
#
#

import logging
import re
from urllib.parse import parse_qs, urlsplit

from .models import HostnameParts, RedirectParams

log = logging.getLogger(__name__)

# Approximates second-level registries such as co.uk or com.au. This is
# not a public suffix list, names like example.ne.jp split wrongly.
SECOND_LEVEL_RE = re.compile(r'(co|com|net|org|gov|edu)\.[a-z]{2}')


def split_hostname(hostname: str) -> HostnameParts:
    """Split ``hostname`` into its registrable domain and subdomain."""
    parts = hostname.split('.')
    if len(parts) <= 2:
        return HostnameParts(domain=hostname)

    if SECOND_LEVEL_RE.fullmatch('.'.join(parts[-2:])):
        if len(parts) > 3:
            return HostnameParts(
                domain='.'.join(parts[-3:]), subdomain='.'.join(parts[:-3])
            )
        return HostnameParts(domain=hostname)

    return HostnameParts(
        domain='.'.join(parts[-2:]), subdomain='.'.join(parts[:-2])
    )


def to_punycode(domain: str) -> str:
    """IDNA-encode ``domain``, returning it unchanged if that fails."""
    try:
        return domain.encode('idna').decode('ascii').lower()
    except UnicodeError as e:
        log.warning('to_punycode: failed to encode %r: %s', domain, e)
        return domain


def parse_redirect_uri(redirect_uri: str) -> RedirectParams:
    """Pull ``state`` and ``code`` out of an authorization callback URI."""
    try:
        parsed = urlsplit(redirect_uri)
        if not parsed.scheme or not parsed.netloc:
            raise ValueError('not an absolute URI')
    except ValueError as e:
        log.warning('parse_redirect_uri: invalid uri %r: %s', redirect_uri, e)
        return RedirectParams()

    query = parse_qs(parsed.query)
    state = query.get('state', [None])[0]
    code = query.get('code', [None])[0]
    return RedirectParams(state=state or None, code=code or None)
