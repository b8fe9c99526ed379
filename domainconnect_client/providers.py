#
#
#

"""Directory of well known DNS hosts, matched by nameserver name."""

from typing import Iterable, List, Optional, Sequence

from .models import DnsProvider


def _provider(name, domains, login_url, site, cname_instructions):
    return DnsProvider(
        name=name,
        domains=tuple(domains),
        login_url=login_url,
        icon_url=f'https://{site}/favicon.ico',
        cname_instructions=cname_instructions,
    )


# Order is significant, the first entry with a matching substring wins.
DEFAULT_PROVIDERS = (
    _provider(
        'GoDaddy',
        ['domaincontrol.com'],
        'https://dcc.godaddy.com/control/portfolio',
        'www.godaddy.com',
        'Open My Products, choose DNS next to the domain, then Add New '
        'Record. Pick CNAME, enter the host in Name and the target in '
        'Value, and save.',
    ),
    _provider(
        'Cloudflare',
        ['cloudflare.com'],
        'https://dash.cloudflare.com/login',
        'www.cloudflare.com',
        'Select the domain, open DNS > Records and click Add record. Pick '
        'CNAME, enter the host in Name and the target in Target. Set the '
        'proxy status to DNS only unless told otherwise, then save.',
    ),
    _provider(
        'Namecheap',
        ['registrar-servers.com', 'namecheaphosting.com'],
        'https://ap.www.namecheap.com/',
        'www.namecheap.com',
        'In Domain List click Manage, open Advanced DNS and choose Add New '
        'Record. Pick CNAME Record, enter the host and the target, then '
        'click the check mark.',
    ),
    _provider(
        'Amazon Route 53',
        ['awsdns'],
        'https://console.aws.amazon.com/route53/',
        'aws.amazon.com',
        'Open Hosted zones, select the domain and click Create record. Enter '
        'the host as Record name, choose CNAME as Record type, paste the '
        'target in Value and create the record.',
    ),
    _provider(
        'Google Cloud DNS',
        ['googledomains.com', 'google.com'],
        'https://console.cloud.google.com/net-services/dns/zones',
        'cloud.google.com',
        'Open the zone, click Add standard, enter the host as DNS name, '
        'choose CNAME as Resource record type and enter the target as '
        'Canonical name.',
    ),
    _provider(
        'Azure DNS',
        ['azure-dns'],
        'https://portal.azure.com/',
        'portal.azure.com',
        'Open the DNS zone, click + Record set, enter the host as Name, '
        'choose CNAME as Type, enter the target as Alias and click OK.',
    ),
    _provider(
        'DigitalOcean',
        ['digitalocean.com'],
        'https://cloud.digitalocean.com/networking/domains',
        'www.digitalocean.com',
        'Open Networking > Domains, select the domain and the CNAME tab. '
        'Enter the host in Hostname, the target in Is an alias of, and '
        'click Create Record.',
    ),
    _provider(
        'Hetzner',
        ['hetzner.com', 'hetzner.de', 'your-server.de', 'first-ns.de',
         'second-ns.de', 'second-ns.com'],
        'https://dns.hetzner.com/',
        'www.hetzner.com',
        'Open the zone, click Add record, choose CNAME as Type, enter the '
        'host as Name and the target as Value, then save.',
    ),
    _provider(
        'OVHcloud',
        ['ovh.net', 'ovh.ca', 'anycast.me'],
        'https://www.ovh.com/manager/',
        'www.ovhcloud.com',
        'Open Domain names, select the domain and the DNS zone tab, then '
        'Add an entry. Pick CNAME, enter the sub-domain and the target, '
        'and confirm.',
    ),
    _provider(
        'IONOS',
        ['ui-dns', '1and1'],
        'https://my.ionos.com/domains',
        'www.ionos.com',
        'Open Domains & SSL, choose DNS for the domain and click Add '
        'record. Pick CNAME, enter the host name and the target, then save.',
    ),
    _provider(
        'Squarespace',
        ['squarespacedns.com'],
        'https://account.squarespace.com/domains',
        'www.squarespace.com',
        'Open the domain, go to DNS and choose Add record under Custom '
        'records. Pick CNAME, enter the host and the data, then save.',
    ),
    _provider(
        'Vercel',
        ['vercel-dns.com'],
        'https://vercel.com/dashboard/domains',
        'vercel.com',
        'Open Domains, select the domain and add a record with type CNAME, '
        'the host as Name and the target as Value.',
    ),
    _provider(
        'Porkbun',
        ['porkbun.com'],
        'https://porkbun.com/account/domainsSpeedy',
        'porkbun.com',
        'Click DNS next to the domain, choose CNAME as Type, enter the host '
        'and the answer, and click Add.',
    ),
    _provider(
        'Gandi',
        ['gandi.net'],
        'https://admin.gandi.net/domain/',
        'www.gandi.net',
        'Open the domain, select DNS Records and click Add record. Pick '
        'CNAME, enter the host as Name and the target as Hostname.',
    ),
    _provider(
        'Hover',
        ['hover.com'],
        'https://www.hover.com/signin',
        'www.hover.com',
        'Open the domain, choose the DNS tab and click Add A Record. Pick '
        'CNAME, enter the host and the target, then save.',
    ),
    _provider(
        'DNSimple',
        ['dnsimple.com', 'dnsimple-edge'],
        'https://dnsimple.com/login',
        'dnsimple.com',
        'Open the domain, select DNS and click Add record, then CNAME. '
        'Enter the host as Name and the target as Content.',
    ),
    _provider(
        'Wix',
        ['wixdns.net'],
        'https://manage.wix.com/account/domains',
        'www.wix.com',
        'Open Domains, choose Manage DNS Records, and under CNAME click '
        'Add Record. Enter the host name and the target, then save.',
    ),
    _provider(
        'Name.com',
        ['name.com'],
        'https://www.name.com/account/domain',
        'www.name.com',
        'Open My Domains, select the domain and Manage DNS Records. Pick '
        'CNAME, enter the host and the answer, and click Add Record.',
    ),
)


class StaticProviderDirectory(object):
    """Read only lookup over an ordered sequence of DnsProvider entries."""

    def __init__(self, providers: Sequence[DnsProvider] = DEFAULT_PROVIDERS):
        self._providers = tuple(providers)
        self._by_name = {p.name: p for p in self._providers}

    def providers(self) -> List[DnsProvider]:
        return list(self._providers)

    def get(self, name: str) -> Optional[DnsProvider]:
        return self._by_name.get(name)

    def lookup(self, nameserver: str) -> Optional[DnsProvider]:
        return self.match([nameserver])

    def match(self, nameservers: Iterable[str]) -> Optional[DnsProvider]:
        nameservers = [ns.lower() for ns in nameservers]
        for provider in self._providers:
            for domain in provider.domains:
                if any(domain in ns for ns in nameservers):
                    return provider
        return None


def identify_provider(
    nameservers: Sequence[str], directory=None
) -> Optional[str]:
    """Name the DNS host serving ``nameservers``.

    Unknown hosts fall back to the registrable part of the first
    nameserver, e.g. ``ns1.example.net`` gives ``example.net``.
    """
    if directory is None:
        directory = StaticProviderDirectory()

    provider = directory.match(nameservers)
    if provider is not None:
        return provider.name

    if not nameservers:
        return None
    labels = [p for p in nameservers[0].lower().rstrip('.').split('.') if p]
    if len(labels) < 2:
        return None
    return '.'.join(labels[-2:])
