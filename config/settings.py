"""Configuration settings and data models."""

import json
import logging
import os
from pathlib import Path
from typing import List, Literal, Optional

import yaml
from pydantic import BaseModel, Field, field_validator

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILES = ("debate_config.json", "debate_config.yaml", "debate_config.yml")


class GroqConfig(BaseModel):
    """Groq chat-completion endpoint configuration."""

    api_key: Optional[str] = Field(
        default=None, description="Groq API key (can also be set via GROQ_API_KEY env var)"
    )
    base_url: str = Field(
        default="https://api.groq.com/openai/v1", description="OpenAI-compatible API base URL"
    )
    model: str = Field(default="llama3-8b-8192", description="Chat model used for generation")
    timeout: float = Field(default=60.0, description="API request timeout in seconds")
    default_retry_after: float = Field(
        default=3.0, description="Seconds to wait after a 429 when the payload gives no hint"
    )
    max_rate_limit_retries: int = Field(
        default=2, description="Retries after a rate-limited response before giving up"
    )

    @field_validator("max_rate_limit_retries")
    @classmethod
    def validate_retries(cls, v: int) -> int:
        if v < 0:
            raise ValueError("max_rate_limit_retries cannot be negative")
        return v


class GenerationConfig(BaseModel):
    """Sampling settings for the generation requests."""

    temperature: float = Field(default=0.7, description="Model temperature")
    debate_max_tokens: int = Field(
        default=4000, description="Token ceiling for full debate point generation"
    )
    list_max_tokens: int = Field(
        default=1000, description="Token ceiling for rebuttal and counter-argument lists"
    )
    default_count: int = Field(
        default=3, description="Items requested when a list request omits count"
    )


class SystemConfig(BaseModel):
    """System-wide configuration."""

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(default="INFO")
    allowed_origins: List[str] = Field(
        default=[], description="CORS origins (ALLOWED_ORIGINS env var overrides)"
    )
    host: str = Field(default="0.0.0.0", description="Bind address for the web server")
    port: int = Field(default=8000, description="Port for the web server")


class AppConfig(BaseModel):
    """Complete application configuration."""

    groq: GroqConfig = Field(default_factory=GroqConfig)
    generation: GenerationConfig = Field(default_factory=GenerationConfig)
    system: SystemConfig = Field(default_factory=SystemConfig)

    @classmethod
    def load_from_file(cls, config_path: Path) -> "AppConfig":
        """Load configuration from a JSON or YAML file."""
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        with open(config_path, "r", encoding="utf-8") as f:
            if config_path.suffix in (".yaml", ".yml"):
                data = yaml.safe_load(f) or {}
            else:
                data = json.load(f)

        if not isinstance(data, dict):
            raise ValueError(f"Config file must contain a mapping: {config_path}")

        unknown_sections = set(data) - {"groq", "generation", "system"}
        if unknown_sections:
            raise ValueError(f"Unknown config sections: {sorted(unknown_sections)}")

        return cls(**data)

    def save_to_file(self, config_path: Path) -> None:
        """Save configuration to YAML file."""
        config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(config_path, "w", encoding="utf-8") as f:
            yaml.dump(
                self.model_dump(exclude_unset=True),
                f,
                default_flow_style=False,
                indent=2,
            )


def get_default_config() -> AppConfig:
    """Load configuration from DEBATE_CONFIG or a debate_config file, else the template."""
    env_path = os.environ.get("DEBATE_CONFIG")
    if env_path:
        return AppConfig.load_from_file(Path(env_path))

    for name in DEFAULT_CONFIG_FILES:
        config_path = Path(name)
        if config_path.exists():
            logger.info(f"Loading configuration from {config_path}")
            return AppConfig.load_from_file(config_path)

    return get_template_config()


def get_template_config() -> AppConfig:
    """Get template configuration for config file generation."""
    return AppConfig(
        groq=GroqConfig(
            api_key=None,  # Set your Groq API key here or use GROQ_API_KEY env var
            base_url="https://api.groq.com/openai/v1",
            model="llama3-8b-8192",
            timeout=60.0,
            default_retry_after=3.0,
            max_rate_limit_retries=2,
        ),
        generation=GenerationConfig(
            temperature=0.7,
            debate_max_tokens=4000,
            list_max_tokens=1000,
            default_count=3,
        ),
        system=SystemConfig(log_level="INFO"),
    )
