"""Configuration management."""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings."""

    # Logging
    log_level: str = Field(default="INFO", description="Log level")
    log_format: str = Field(
        default="console", description="Log renderer, either 'json' or 'console'"
    )

    # Generation
    default_seed: Optional[str] = Field(
        default=None,
        description="Seed used when no random source is supplied; None seeds from the clock",
    )

    # Mapping
    planet_map_resolution: int = Field(
        default=2048, description="Width in pixels of rendered planet maps"
    )
    default_face_size: int = Field(
        default=24, description="Edge resolution of each icosahedron face"
    )
    cloud_face_size: int = Field(
        default=48, description="Edge resolution of cloud layer grids"
    )

    class Config:
        env_file = ".env"
        env_prefix = "WORLDGEN_"


settings = Settings()
