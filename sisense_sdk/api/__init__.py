"""API resource handlers and the version table that maps logical names to them.

Adding an API generation or operation means adding a handler class and an
entry here; nothing is looked up by string at runtime.
"""

from collections.abc import Mapping
from types import MappingProxyType

from sisense_sdk.api import v09, v1
from sisense_sdk.api.base import AbstractApi
from sisense_sdk.models.config import V0_9, V1_0

HandlerFactory = type[AbstractApi]

VERSION_TABLE: Mapping[str, Mapping[str, HandlerFactory]] = MappingProxyType({
    V0_9: MappingProxyType({
        "authorization": v09.Authorization,
        "elasticubes": v09.ElastiCubes,
        "branding": v09.Branding,
        "reporting": v09.Reporting,
        "palettes": v09.Palettes,
        "users": v09.Users,
        "groups": v09.Groups,
        "settings": v09.Settings,
        "roles": v09.Roles,
        "data_sources": v09.DataSources,
        "geo": v09.Geo,
    }),
    V1_0: MappingProxyType({
        "users": v1.Users,
        "groups": v1.Groups,
        "application": v1.Application,
        "authentication": v1.Authentication,
        "account": v1.Account,
        "admin": v1.Admin,
    }),
})

__all__ = ["AbstractApi", "HandlerFactory", "VERSION_TABLE", "v09", "v1"]
