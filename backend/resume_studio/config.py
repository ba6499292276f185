from pydantic_settings import BaseSettings
from typing import Optional


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # App
    app_name: str = "Resume Studio"
    debug: bool = True
    log_level: str = "INFO"

    # CORS
    frontend_url: str = "http://localhost:3000"

    # Text-generation backends (each one is enabled only when configured)
    deepseek_api_key: Optional[str] = None
    huggingface_api_key: Optional[str] = None
    ollama_enabled: bool = False
    ollama_base_url: str = "http://localhost:11434"

    # Comma-separated backend order tried by the AI service manager
    ai_priority: str = "deepseek,ollama,huggingface"
    backend_timeout_seconds: float = 30.0

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()


# ── Backend Registry ────────────────────────────────────────────────────────

BACKENDS = {
    "deepseek": {
        "name": "DeepSeek Chat",
        "model_id": "deepseek/deepseek-chat",
        "description": "Hosted model, best quality for bullet rewrites",
        "credential": "deepseek_api_key",
    },
    "ollama": {
        "name": "Ollama (Llama 3.1 8B)",
        "model_id": "ollama/llama3.1:8b",
        "description": "Local model, free and private",
        "credential": None,
    },
    "huggingface": {
        "name": "Hugging Face Inference",
        "model_id": "huggingface/mistralai/Mistral-7B-Instruct-v0.2",
        "description": "Free-tier hosted inference, slower",
        "credential": "huggingface_api_key",
    },
}

# ── Prompt Configuration ────────────────────────────────────────────────────

PROMPT_CONFIG = {
    "enhance_text": {"temperature": 0.7, "max_tokens": 300},
    "quantified_enhance": {"temperature": 0.7, "max_tokens": 400},
    "skill_suggestions": {"temperature": 0.8, "max_tokens": 400},
    "career_summary": {"temperature": 0.7, "max_tokens": 300},
    "achievements": {"temperature": 0.8, "max_tokens": 500},
    "cover_letter": {"temperature": 0.7, "max_tokens": 800},
}
