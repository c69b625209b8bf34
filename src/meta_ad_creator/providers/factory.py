from __future__ import annotations

from .base import CredentialSelector, GenerationBackend
from .credentials import EnvCredentialSelector, StaticCredentialSelector
from .gemini_developer import GeminiDeveloperBackend
from .mock import MockGenerationBackend


def create_backend(provider: str, api_key_env: str = "GEMINI_API_KEY") -> GenerationBackend:
    if provider == "mock":
        return MockGenerationBackend()
    if provider == "real":
        return GeminiDeveloperBackend(api_key_env=api_key_env)

    raise ValueError(f"Unknown provider mode: {provider}")


def create_credentials(provider: str, api_key_env: str = "GEMINI_API_KEY") -> CredentialSelector:
    if provider == "mock":
        return StaticCredentialSelector()
    if provider == "real":
        return EnvCredentialSelector(api_key_env=api_key_env)

    raise ValueError(f"Unknown provider mode: {provider}")
