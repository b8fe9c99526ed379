#
#
#

"""Configuration for DomainConnectClient and its default collaborators.

Values are resolved in order:
1. Explicit values passed in the config dict.
2. Environment variables (DOMAINCONNECT_TIMEOUT, DOMAINCONNECT_USER_AGENT,
   DOMAINCONNECT_DNS_LIFETIME, DOMAINCONNECT_NAMESERVERS).
3. The defaults below.
"""

import os
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator
from requests import __version__ as requests_version

ENV_MAP = {
    'timeout': 'DOMAINCONNECT_TIMEOUT',
    'user_agent': 'DOMAINCONNECT_USER_AGENT',
    'dns_lifetime': 'DOMAINCONNECT_DNS_LIFETIME',
    'nameservers': 'DOMAINCONNECT_NAMESERVERS',
}


class DomainConnectConfig(BaseModel):
    model_config = ConfigDict(extra='forbid', frozen=True)

    timeout: float = Field(
        default=10.0, gt=0, description='HTTP request timeout in seconds'
    )
    user_agent: str = Field(
        default_factory=lambda: default_user_agent(),
        description='User-Agent header',
    )
    dns_lifetime: float = Field(
        default=5.0, gt=0, description='Total NS query lifetime in seconds'
    )
    nameservers: Optional[List[str]] = Field(
        default=None, description='Upstream resolver IPs, system if unset'
    )

    @model_validator(mode='before')
    @classmethod
    def resolve_from_env(cls, values: Dict[str, Any]) -> Dict[str, Any]:
        """Fall back to environment variables for unset fields."""
        if not isinstance(values, dict):
            return values
        values = dict(values)
        for field, env_var in ENV_MAP.items():
            if values.get(field) is not None:
                continue
            raw = os.environ.get(env_var)
            if not raw:
                continue
            if field == 'nameservers':
                values[field] = [s.strip() for s in raw.split(',') if s.strip()]
            else:
                values[field] = raw
        return values


def default_user_agent() -> str:
    # Lazy import, the package __init__ imports this module
    from . import __version__ as package_version

    return f'domainconnect-client/{package_version} requests/{requests_version}'
