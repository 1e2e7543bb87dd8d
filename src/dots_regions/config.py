"""Rendering configuration."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Region rendering settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="DOTS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Size of one board cell in drawing units
    cell_spacing: float = Field(24.0, allow_inf_nan=False)

    # Region outlines
    corner_radius: float = Field(4.0, allow_inf_nan=False)
    halo_distance: float = Field(8.0, allow_inf_nan=False)  # One third of the default cell spacing
    normalize_winding: bool = True

    # Decimal places kept in SVG path data
    path_precision: int = 2

    # Logging
    log_level: str = "info"

    @field_validator("cell_spacing")
    @classmethod
    def check_cell_spacing(cls, v: float) -> float:
        """Cell spacing must be positive."""
        if v <= 0:
            raise ValueError("cell_spacing must be positive")
        return v

    @field_validator("corner_radius", "halo_distance", "path_precision")
    @classmethod
    def check_not_negative(cls, v):
        """Radius, halo distance and precision cannot be negative."""
        if v < 0:
            raise ValueError("must not be negative")
        return v


settings = Settings()
