"""Plugin discovery descriptor."""

from pubmed_proxy.config import Settings
from pubmed_proxy.constants import (
    PLUGIN_DESCRIPTION_FOR_HUMAN,
    PLUGIN_DESCRIPTION_FOR_MODEL,
    PLUGIN_NAME_FOR_HUMAN,
    PLUGIN_NAME_FOR_MODEL,
)
from pubmed_proxy.models.model_manifest import ManifestApi, PluginManifest


def build_manifest(base_url: str, settings: Settings) -> PluginManifest:
    """Build the ai-plugin.json descriptor for a service reachable at base_url."""
    base_url = base_url.rstrip("/")
    return PluginManifest(
        name_for_human=PLUGIN_NAME_FOR_HUMAN,
        name_for_model=PLUGIN_NAME_FOR_MODEL,
        description_for_human=PLUGIN_DESCRIPTION_FOR_HUMAN,
        description_for_model=PLUGIN_DESCRIPTION_FOR_MODEL,
        api=ManifestApi(url=f"{base_url}/.well-known/openapi.yaml"),
        logo_url=f"{base_url}/logo.png",
        contact_email=settings.plugin_contact_email,
        legal_info_url=settings.plugin_legal_info_url,
    )
