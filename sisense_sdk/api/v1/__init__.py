"""Handlers for the v1.0 REST API (`/api/v1`)."""

from sisense_sdk.api.v1.account import Account
from sisense_sdk.api.v1.admin import Admin
from sisense_sdk.api.v1.application import Application
from sisense_sdk.api.v1.authentication import Authentication
from sisense_sdk.api.v1.groups import Groups
from sisense_sdk.api.v1.users import Users

__all__ = ["Account", "Admin", "Application", "Authentication", "Groups", "Users"]
