"""Pydantic models for the ai-plugin.json discovery descriptor."""

from typing import Literal

from pydantic import BaseModel


class ManifestAuth(BaseModel):
    type: Literal["none"] = "none"


class ManifestApi(BaseModel):
    type: Literal["openapi"] = "openapi"
    url: str


class PluginManifest(BaseModel):
    """Static plugin descriptor served at /.well-known/ai-plugin.json."""

    schema_version: str = "v1"
    name_for_human: str
    name_for_model: str
    description_for_human: str
    description_for_model: str
    auth: ManifestAuth = ManifestAuth()
    api: ManifestApi
    logo_url: str
    contact_email: str
    legal_info_url: str
