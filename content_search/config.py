# Content Search Configuration
"""Configuration settings loaded from environment variables."""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Content search settings from environment variables."""

    # Ghost Content API
    ghost_content_endpoint: str = Field(
        default="",
        description="Ghost Content API base URL (e.g. https://site.ghost.io/ghost/api/content)",
    )
    ghost_api_key: str = Field(
        default="",
        description="Ghost Content API key",
    )
    ghost_page_size: int = Field(
        default=100,
        description="Records requested per Ghost page",
    )

    # Contentful GraphQL Content API
    contentful_space_id: str = Field(
        default="",
        description="Contentful space ID",
    )
    contentful_access_token: str = Field(
        default="",
        description="Contentful Content Delivery API access token",
    )
    contentful_graphql_url: str = Field(
        default="https://graphql.contentful.com/content/v1/spaces",
        description="Contentful GraphQL endpoint (space ID is appended)",
    )

    request_timeout: int = Field(
        default=30,
        description="Content source request timeout in seconds",
    )

    # Authentication (empty = dev mode, no auth on the HTTP surface)
    service_api_key: str = Field(
        default="",
        description="API key required from HTTP clients",
    )

    # Server settings
    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=8030, description="Server port")
    log_level: str = Field(default="INFO", description="Logging level")
    debug: bool = Field(default=False, description="Debug mode")

    # SSL settings (optional)
    ssl_keyfile: Optional[str] = Field(default=None, description="Path to SSL private key")
    ssl_certfile: Optional[str] = Field(default=None, description="Path to SSL certificate")

    # MCP server identity
    mcp_server_name: str = Field(
        default="content-search",
        description="MCP server name",
    )
    mcp_server_version: str = Field(
        default="1.0.0",
        description="MCP server version",
    )

    class Config:
        env_prefix = ""
        case_sensitive = False
        env_file = ".env"
        env_file_encoding = "utf-8"


# Global settings instance
settings = Settings()
