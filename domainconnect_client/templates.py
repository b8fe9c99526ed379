#
#
#

"""Template variable substitution and record resolution."""

import re
from typing import List, Mapping, Optional

from .models import ParameterValidation, ParamValue, Template, TemplateRecord

VARIABLE_RE = re.compile(r'%([A-Za-z0-9_]+)%')

APEX = '@'
HOST_PLACEHOLDER = '%host%'


def format_value(value: ParamValue) -> str:
    """Render a parameter value the way it appears in DNS data and URLs."""
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, float):
        if value.is_integer():
            return str(int(value))
        return repr(value)
    return str(value)


def substitute(text: str, params: Mapping[str, ParamValue]) -> str:
    """Replace ``%name%`` variables in ``text`` with values from ``params``.

    Variables with no matching key are left in place, delimiters
    included.
    """

    def replace(match):
        value = params.get(match.group(1))
        if value is None:
            return match.group(0)
        return format_value(value)

    return VARIABLE_RE.sub(replace, text)


def _resolve_host(raw: str, params, host: Optional[str]) -> str:
    resolved = substitute(raw, params)

    if host:
        if resolved == APEX:
            resolved = host
        elif resolved != HOST_PLACEHOLDER:
            resolved = f'{resolved}.{host}'

    # %host% is never concatenated above, it is assigned here
    if resolved == HOST_PLACEHOLDER:
        resolved = host if host else APEX

    return resolved


def resolve_records(
    template: Template,
    params: Mapping[str, ParamValue],
    domain: str,
    host: Optional[str] = None,
) -> List[TemplateRecord]:
    """Produce the concrete records a template describes.

    Order and every field other than ``host`` and ``points_to`` are
    preserved. With a ``host``, relative record names are placed under
    it and the apex (``@``) becomes the host itself.
    """
    resolved = []
    for record in template.records:
        update = {'host': _resolve_host(record.host, params, host)}
        if record.points_to:
            update['points_to'] = substitute(record.points_to, params)
        resolved.append(record.model_copy(update=update))
    return resolved


def validate_parameters(
    template: Template, params: Mapping[str, ParamValue]
) -> ParameterValidation:
    if not template.parameters:
        return ParameterValidation(valid=True, missing=[])

    missing = [
        p.name
        for p in template.parameters
        if p.required and params.get(p.name) is None
    ]
    return ParameterValidation(valid=not missing, missing=missing)
