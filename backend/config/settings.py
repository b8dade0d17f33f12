from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import BaseModel
import yaml
import os

class GeminiConfig(BaseModel):
    base_url: str = "https://generativelanguage.googleapis.com"
    api_version: str = "v1beta"
    model: str = "gemini-2.0-flash"
    timeout: float | None = None     # None = wait for the provider indefinitely

class UIConfig(BaseModel):
    prompt_template: str = "Summarize the following text concisely and accurately:"
    empty_input_message: str = "Please enter some text to summarize."
    transport_fallback_message: str = "Failed to fetch summary from API."
    malformed_response_message: str = "Could not get a valid summary. Please try again."

class AppSettings(BaseSettings):
    gemini: GeminiConfig = GeminiConfig()
    ui: UIConfig = UIConfig()
    gemini_api_key: str = ""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

def load_settings(config_path: str = "backend/config/config.yaml") -> AppSettings:
    """Loads settings from config.yaml and applies env overrides."""

    # Try multiple paths for convenience during testing vs running
    paths_to_try = [
        config_path,
        "config.yaml",
        "config/config.yaml",
        os.path.join(os.path.dirname(__file__), "config.yaml")
    ]

    yaml_data = {}
    for path in paths_to_try:
        if os.path.exists(path):
            with open(path, "r", encoding="utf-8") as f:
                yaml_data = yaml.safe_load(f) or {}
            break

    # The API key is never read from yaml; it comes from GEMINI_API_KEY / .env
    return AppSettings(
        gemini=GeminiConfig(**yaml_data.get("gemini", {})),
        ui=UIConfig(**yaml_data.get("ui", {}))
    )

# Global settings instance
settings = load_settings()
