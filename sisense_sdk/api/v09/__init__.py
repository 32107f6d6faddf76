"""Handlers for the legacy v0.9 REST API (`/api`)."""

from sisense_sdk.api.v09.authorization import Authorization
from sisense_sdk.api.v09.branding import Branding
from sisense_sdk.api.v09.data_sources import DataSources
from sisense_sdk.api.v09.elasticubes import ElastiCubes
from sisense_sdk.api.v09.geo import Geo
from sisense_sdk.api.v09.groups import Groups
from sisense_sdk.api.v09.palettes import Palettes
from sisense_sdk.api.v09.reporting import Reporting
from sisense_sdk.api.v09.roles import Roles
from sisense_sdk.api.v09.settings import Settings
from sisense_sdk.api.v09.users import Users

__all__ = [
    "Authorization",
    "Branding",
    "DataSources",
    "ElastiCubes",
    "Geo",
    "Groups",
    "Palettes",
    "Reporting",
    "Roles",
    "Settings",
    "Users",
]
