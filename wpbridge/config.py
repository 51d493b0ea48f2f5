from pydantic import BaseModel, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class HookPriorities(BaseModel):
    """Default priorities used when a registration omits one."""

    default: int = 10
    footer: int = 100


class Config(BaseSettings):
    """
    Adapter configuration loaded from multiple sources.

    Priority (highest to lowest):
    1. Environment variables
    2. .env file
    3. Default values
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Hook priorities (WordPress runs lower numbers first)
    DEFAULT_HOOK_PRIORITY: int = 10
    FOOTER_HOOK_PRIORITY: int = 100

    # Ajax hook names are "<prefix><action>"
    AJAX_HOOK_PREFIX: str = "wp_ajax_"
    AJAX_NOPRIV_HOOK_PREFIX: str = "wp_ajax_nopriv_"

    # Trace every runtime invoke at DEBUG level
    LOG_RUNTIME_CALLS: bool = False

    @field_validator("AJAX_HOOK_PREFIX", "AJAX_NOPRIV_HOOK_PREFIX")
    @classmethod
    def validate_prefix(cls, v: str, info) -> str:
        """Ensure ajax prefixes are non-empty and end with an underscore."""
        if not v or not v.endswith("_"):
            raise ValueError(f"{info.field_name} must be non-empty and end with '_', got {v!r}")
        return v

    @property
    def priorities(self) -> HookPriorities:
        """Build HookPriorities from the current flat settings."""
        return HookPriorities(
            default=self.DEFAULT_HOOK_PRIORITY,
            footer=self.FOOTER_HOOK_PRIORITY,
        )


config = Config()
