"""Session-scoped state: parameters, assets and the result/error sink.

A presentation layer owns one :class:`AdSession` and passes it to
:func:`meta_ad_creator.pipeline.generate_ad`; nothing here is global.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from meta_ad_creator.assets.store import AssetStore
from meta_ad_creator.exceptions import FailureKind
from meta_ad_creator.models.ad import AdParameters, GeneratedCreative

logger = logging.getLogger(__name__)

PHASE_COMPOSING = "Crafting your ad creative..."


def calling_phase(model_label: str) -> str:
    return f"Generating ad visuals with {model_label}..."


@dataclass(slots=True)
class ResultSink:
    creative: GeneratedCreative | None = None
    error: str | None = None
    failure_kind: FailureKind | None = None
    is_generating: bool = False
    phase: str = ""
    listener: Callable[["ResultSink"], None] | None = None

    def _notify(self) -> None:
        if self.listener is not None:
            self.listener(self)

    def begin(self) -> None:
        # The previous creative stays visible until a new one arrives.
        self.error = None
        self.failure_kind = None
        self.is_generating = True
        self.phase = PHASE_COMPOSING
        self._notify()

    def set_phase(self, phase: str) -> None:
        self.phase = phase
        logger.info(phase)
        self._notify()

    def succeed(self, creative: GeneratedCreative) -> None:
        self.creative = creative
        self.error = None
        self.failure_kind = None
        self._notify()

    def fail(self, kind: FailureKind, message: str) -> None:
        self.error = message
        self.failure_kind = kind
        self._notify()

    def finish(self) -> None:
        self.is_generating = False
        self.phase = ""
        self._notify()


@dataclass(slots=True)
class AdSession:
    parameters: AdParameters = field(default_factory=AdParameters)
    assets: AssetStore = field(default_factory=AssetStore)
    result: ResultSink = field(default_factory=ResultSink)
    request_token: int = 0

    def next_request_token(self) -> int:
        self.request_token += 1
        return self.request_token

    def is_current(self, token: int) -> bool:
        return token == self.request_token
