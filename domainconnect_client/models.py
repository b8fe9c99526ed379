#
#
#

"""Data model for the Domain Connect protocol.

Field names are snake_case; the camelCase names used on the wire are
kept as aliases, so models validate from either spelling and serialise
back to the protocol form with ``model_dump(by_alias=True)``.
"""

from typing import Dict, List, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

ParamValue = Union[str, bool, int, float]

RecordType = Literal[
    'A', 'AAAA', 'CNAME', 'TXT', 'SRV', 'MX', 'NS', 'SPFM', 'PTR'
]

DataType = Literal['STRING', 'NUMBER', 'EMAIL', 'URL', 'BOOLEAN']


class _Model(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)


class TemplateParameter(_Model):
    """A parameter a template expects the caller to supply."""

    name: str
    data_type: Optional[DataType] = Field(default=None, alias='dataType')
    required: Optional[bool] = None
    default_value: Optional[ParamValue] = Field(
        default=None, alias='defaultValue'
    )
    description: Optional[str] = None
    hidden: Optional[bool] = None


class TemplateRecord(_Model):
    """A DNS record recipe.

    ``host`` and ``points_to`` may contain ``%name%`` placeholders or the
    ``@`` / ``%host%`` sentinels. Keys the protocol defines beyond the
    ones modelled here (``groupId``, ``txtConflictMatchingMode``, ...)
    are kept as extra fields and carried through resolution.
    """

    model_config = ConfigDict(extra='allow')

    type: RecordType
    host: str
    points_to: Optional[str] = Field(default=None, alias='pointsTo')
    ttl: Optional[int] = None
    priority: Optional[int] = None
    weight: Optional[int] = None
    port: Optional[int] = None


class Template(_Model):
    provider_id: str = Field(alias='providerId')
    service_id: str = Field(alias='serviceId')
    name: Optional[str] = None
    description: Optional[str] = None
    version: Optional[Union[str, int]] = None
    host_required: Optional[bool] = Field(default=None, alias='hostRequired')
    parameters: Optional[List[TemplateParameter]] = None
    records: List[TemplateRecord]
    logo_url: Optional[str] = Field(default=None, alias='logoUrl')
    sync_supported: Optional[bool] = Field(
        default=None, alias='syncSupported'
    )
    async_supported: Optional[bool] = Field(
        default=None, alias='asyncSupported'
    )


class DomainConnectSettings(_Model):
    """Endpoints and capabilities discovered for a DNS provider."""

    url_api: str = Field(alias='urlAPI')
    sync_enabled: Optional[bool] = Field(default=None, alias='syncEnabled')
    async_enabled: Optional[bool] = Field(default=None, alias='asyncEnabled')
    url_async_api: Optional[str] = Field(default=None, alias='urlAsyncAPI')


class DomainConnectOptions(_Model):
    """A single apply request."""

    domain: str
    provider_id: str = Field(alias='providerId')
    service_id: str = Field(alias='serviceId')
    params: Dict[str, ParamValue] = Field(default_factory=dict)
    host: Optional[str] = None
    redirect_uri: Optional[str] = Field(default=None, alias='redirectUri')
    state: Optional[str] = None
    force_permission: bool = Field(default=False, alias='forcePermission')


class DomainConnectResult(_Model):
    success: bool
    redirect_url: Optional[str] = Field(default=None, alias='redirectUrl')
    error: Optional[str] = None
    async_status_url: Optional[str] = Field(
        default=None, alias='asyncStatusUrl'
    )


class DnsProvider(_Model):
    """Directory entry for a DNS host.

    ``domains`` are substrings matched against lower-cased nameserver
    names.
    """

    name: str
    domains: Tuple[str, ...]
    login_url: str = Field(alias='loginUrl')
    icon_url: str = Field(alias='iconUrl')
    cname_instructions: str = Field(alias='cnameInstructions')


class DnsProviderInfo(_Model):
    domain: str
    nameservers: Tuple[str, ...] = ()
    provider: str
    login_url: Optional[str] = Field(default=None, alias='loginUrl')
    icon_url: Optional[str] = Field(default=None, alias='iconUrl')
    cname_instructions: Optional[str] = Field(
        default=None, alias='cnameInstructions'
    )
    error: Optional[str] = None


class ParameterValidation(_Model):
    valid: bool
    missing: List[str] = Field(default_factory=list)


class HostnameParts(_Model):
    domain: str
    subdomain: Optional[str] = None


class RedirectParams(_Model):
    state: Optional[str] = None
    code: Optional[str] = None
