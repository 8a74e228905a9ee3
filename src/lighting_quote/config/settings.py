"""
Centralized settings and default business inputs for the quote tool.

Values resolve in this order: a JSON defaults file, LIGHTING_QUOTE_*
environment variables, then the built-in defaults below.
"""
import logging
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..engine.models import MinimumRule, PricingConfig

logger = logging.getLogger(__name__)

DEFAULTS_FILENAME = 'pricing_defaults.json'
DEFAULTS_ENV_VAR = 'LIGHTING_QUOTE_DEFAULTS'


def get_project_root() -> Path:
    """Get the project root directory (where pyproject.toml lives)."""
    current = Path(__file__).resolve()
    for parent in current.parents:
        if (parent / DEFAULTS_FILENAME).exists() or (parent / 'pyproject.toml').exists():
            return parent
    # Fallback to 3 levels up from this file
    return Path(__file__).resolve().parent.parent.parent.parent


def _default_kit_costs() -> dict[int, float]:
    # Kit costs include tax and shipping
    return {100: 1488.24, 150: 2039.04, 200: 2514.24, 400: 4713.12}


class MinimumRuleSettings(BaseModel):
    enabled: bool = True
    threshold_ft: int = 75
    minimum: float = 2000.0


class PricingDefaults(BaseModel):
    """Shape of pricing_defaults.json. Every key is optional."""
    model_config = ConfigDict(extra='ignore')

    kit_costs: Optional[dict[int, float]] = None
    rate_under_100: Optional[float] = None
    rate_under_200: Optional[float] = None
    rate_200_plus: Optional[float] = None
    use_lift: Optional[bool] = None
    lift_rental_per_day: Optional[float] = None
    lift_days: Optional[int] = None
    min_rule: Optional[MinimumRuleSettings] = None
    default_footage: Optional[int] = None


class Settings(BaseSettings):
    """Application settings with sensible defaults."""

    model_config = SettingsConfigDict(
        env_prefix='LIGHTING_QUOTE_',
        env_nested_delimiter='__',
        extra='ignore',
    )

    project_root: Path = Field(default_factory=get_project_root)

    # LIGHTING_QUOTE_DEFAULTS: path of a JSON defaults file
    defaults: Optional[Path] = None
    # The file that was actually applied, if any
    defaults_file: Optional[Path] = None

    kit_costs: dict[int, float] = Field(default_factory=_default_kit_costs)
    rate_under_100: float = 27.0
    rate_under_200: float = 25.0
    rate_200_plus: float = 23.0
    use_lift: bool = True
    lift_rental_per_day: float = 489.0
    lift_days: int = 1
    min_rule: MinimumRuleSettings = Field(default_factory=MinimumRuleSettings)

    default_footage: int = 159

    @classmethod
    def load(cls, project_root: Optional[Path] = None, defaults_file: Optional[Path] = None) -> 'Settings':
        """
        Load settings, overlaying an optional JSON defaults file.

        File lookup order: explicit ``defaults_file``, the path in
        LIGHTING_QUOTE_DEFAULTS, then pricing_defaults.json in the project root.
        """
        root = project_root or get_project_root()
        settings = cls(project_root=root)

        path = defaults_file or settings.defaults or root / DEFAULTS_FILENAME
        if not path.exists():
            return settings

        overlay = read_defaults_file(path)
        if overlay is None:
            return settings
        return cls(project_root=root, defaults_file=path, **overlay.model_dump(exclude_unset=True, exclude_none=True))

    def pricing_config(self) -> PricingConfig:
        """Build the default PricingConfig from these settings."""
        return PricingConfig(
            kit_costs=dict(self.kit_costs),
            rate_under_100=self.rate_under_100,
            rate_under_200=self.rate_under_200,
            rate_200_plus=self.rate_200_plus,
            use_lift=self.use_lift,
            lift_rental_per_day=self.lift_rental_per_day,
            lift_days=self.lift_days,
            min_rule=MinimumRule(**self.min_rule.model_dump()),
        )


def read_defaults_file(path: Path) -> Optional[PricingDefaults]:
    """Parse and validate a JSON defaults file; None when it is unusable."""
    try:
        return PricingDefaults.model_validate_json(path.read_text(encoding='utf-8'))
    except (OSError, ValidationError) as e:
        logger.warning("Could not read pricing defaults from %s: %s", path, e)
        return None


# Default settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings.load()
    return _settings


def reset_settings():
    """Drop the cached settings so the next get_settings() reloads."""
    global _settings
    _settings = None
