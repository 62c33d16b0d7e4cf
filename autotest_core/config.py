"""autotest-core configuration.

Defaults for provider selection, output locations and browser behaviour.
Values come from the environment (a ``.env`` file is loaded at import).
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from autotest_core.errors import ConfigurationError
from autotest_core.llm.providers.base import ProviderConfig
from autotest_core.llm.providers.factory import supported_providers

load_dotenv()

# =============================================================================
# PROVIDER SELECTION
# =============================================================================

# Vendor used when none is chosen explicitly
DEFAULT_PROVIDER = "deepseek"

# Environment variable prefix per vendor: <PREFIX>_API_KEY, _BASE_URL, _MODEL
PROVIDER_ENV_PREFIX = {
    "claude": "CLAUDE",
    "deepseek": "DEEPSEEK",
    "openai": "OPENAI",
    "gemini": "GEMINI",
    "qwen": "QWEN",
    "glm": "GLM",
}

# Request timeout (seconds) for vendor calls
PROVIDER_TIMEOUT = 120.0

# =============================================================================
# OUTPUT & PROMPTS
# =============================================================================

DEFAULT_OUTPUT_DIR = Path("output")

# None = templates shipped with the package
DEFAULT_PROMPTS_DIR: Optional[Path] = None

# =============================================================================
# BROWSER
# =============================================================================

HEADLESS = True

# Playwright default timeout per operation (seconds)
BROWSER_TIMEOUT = 60

# Extra pause after each step on top of the load-state wait (0 = disabled)
SETTLE_DELAY_MS = 0


# =============================================================================
# CONFIGURATION CLASS
# =============================================================================

def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _env_number(name: str, default, cast):
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    try:
        return cast(value)
    except ValueError:
        raise ConfigurationError(f"{name} must be a number, got {value!r}")


@dataclass
class AutotestSettings:
    """Runtime settings for a pipeline run and its execution."""

    provider: str = DEFAULT_PROVIDER
    output_dir: Path = DEFAULT_OUTPUT_DIR
    prompts_dir: Optional[Path] = DEFAULT_PROMPTS_DIR
    headless: bool = HEADLESS
    timeout: int = BROWSER_TIMEOUT
    settle_delay_ms: int = SETTLE_DELAY_MS

    @classmethod
    def from_env(cls) -> "AutotestSettings":
        """Load settings from environment variables, falling back to defaults."""
        prompts_dir = os.getenv("AUTOTEST_PROMPTS_DIR")
        return cls(
            provider=os.getenv("DEFAULT_AI_PROVIDER", DEFAULT_PROVIDER).strip().lower(),
            output_dir=Path(os.getenv("AUTOTEST_OUTPUT_DIR") or DEFAULT_OUTPUT_DIR),
            prompts_dir=Path(prompts_dir) if prompts_dir else DEFAULT_PROMPTS_DIR,
            headless=_env_bool("AUTOTEST_HEADLESS", HEADLESS),
            timeout=_env_number("AUTOTEST_TIMEOUT", BROWSER_TIMEOUT, int),
            settle_delay_ms=_env_number("AUTOTEST_SETTLE_DELAY_MS", SETTLE_DELAY_MS, int),
        )


def load_provider_config(vendor_id: Optional[str] = None) -> ProviderConfig:
    """
    Build a ProviderConfig for a vendor from the environment.

    Args:
        vendor_id: Vendor id (default: DEFAULT_AI_PROVIDER)

    Returns:
        ProviderConfig; ``api_key`` is empty when the variable is unset

    Raises:
        ConfigurationError: If the vendor id is unknown
    """
    key = (vendor_id or os.getenv("DEFAULT_AI_PROVIDER", DEFAULT_PROVIDER)).strip().lower()
    prefix = PROVIDER_ENV_PREFIX.get(key)
    if prefix is None:
        raise ConfigurationError(
            f"Unknown provider '{key}'. Supported providers: {', '.join(supported_providers())}"
        )

    return ProviderConfig(
        vendor_id=key,
        api_key=os.getenv(f"{prefix}_API_KEY", ""),
        base_url=os.getenv(f"{prefix}_BASE_URL") or None,
        model=os.getenv(f"{prefix}_MODEL") or None,
        timeout=_env_number(f"{prefix}_TIMEOUT", PROVIDER_TIMEOUT, float),
    )


def configured_providers() -> list[str]:
    """Vendors that have an API key in the environment."""
    return [
        vendor for vendor, prefix in PROVIDER_ENV_PREFIX.items()
        if os.getenv(f"{prefix}_API_KEY")
    ]
