from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from meta_ad_creator.generation.request import GenerationRequest


class GenerationBackend(ABC):
    @abstractmethod
    async def generate_content(self, request: GenerationRequest) -> Any:
        """Issue one call and return the raw response (``candidates[].content.parts[]``)."""
        raise NotImplementedError


class CredentialSelector(ABC):
    @abstractmethod
    async def has_selected_key(self) -> bool:
        raise NotImplementedError

    @abstractmethod
    async def select_key(self) -> bool:
        """Run the interactive selection flow; True when a key is now available."""
        raise NotImplementedError
