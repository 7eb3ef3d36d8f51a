# hebrew_pattern_tool/infrastructure/config/_sources.py

"""Pydantic model for the built-in word source registry"""

# Standard library imports
from pathlib import Path
from urllib.parse import urljoin

# Third party imports
from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic import model_validator

DEFAULT_REGISTRY: dict[str, str] = {
    "adjectives": "adjectives.txt",
    "nouns": "nouns.txt",
    "verbs": "verbs_no_fatverb.txt",
    "he_IL": "he_IL.dic",
}


def is_url(location: str) -> bool:
    """True for absolute http(s) locations"""
    return location.startswith(("http://", "https://"))


class SourcesConfig(BaseModel):
    """Built-in source registry: key -> resource location

    Relative locations are joined to base_url when it is set, otherwise they
    are files under resource_dir.
    """

    model_config = ConfigDict(frozen=True)

    registry: dict[str, str] = Field(default_factory=lambda: dict(DEFAULT_REGISTRY))
    base_url: str | None = Field(None, description="Base URL for relative registry locations")
    resource_dir: str = Field("wordlists", description="Directory for relative registry locations")
    default_keys: list[str] = Field(
        default_factory=lambda: list(DEFAULT_REGISTRY),
        description="Sources searched when none are chosen explicitly",
    )

    @model_validator(mode="after")
    def validate_default_keys(self) -> "SourcesConfig":
        """Default keys must be registered"""
        unknown = [k for k in self.default_keys if k not in self.registry]
        if unknown:
            raise ValueError(f"default_keys not in registry: {', '.join(unknown)}")
        return self

    def resolve(self, key: str) -> str | None:
        """Resolve a registry key to a URL or file path

        Args:
            key: Registry key

        Returns:
            Absolute URL or file path, None if key is not registered
        """
        location = self.registry.get(key)
        if location is None:
            return None
        if is_url(location):
            return location
        if self.base_url:
            base = self.base_url if self.base_url.endswith("/") else f"{self.base_url}/"
            return urljoin(base, location)
        return str(Path(self.resource_dir) / location)
