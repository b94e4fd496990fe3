"""Name generator with collision detection.

Resolves the eligible words for a request and walks the ordered strategy
chain until one yields a name that is free in the caller's session set and
in the ledger. Only configuration errors escape; exhausting a strategy moves
on to the next one.

The generator does not lock the ledger. Two concurrent callers may both see
a slug as free before either registers it; callers that need cross-process
uniqueness must serialize generate-and-register.
"""

from __future__ import annotations

import datetime as dt
import logging
from collections.abc import Sequence

from image_namer.config import Settings, get_settings
from image_namer.generation.rng import SeededRNG
from image_namer.generation.strategies import (
    AbsoluteFallbackStrategy,
    GenerationContext,
    NameStrategy,
    default_strategies,
)
from image_namer.generation.word_banks import resolve_word_pools
from image_namer.ledger.ports import NameLedger
from image_namer.models import GeneratedName, GenerationRequest

logger = logging.getLogger(__name__)


def _pick(value, default):
    return default if value is None else value


class NameGenerator:
    """Generates one unique name per call.

    Example:
        >>> generator = NameGenerator(InMemoryNameLedger())
        >>> request = GenerationRequest(preset=preset, word_banks=banks, extension=".jpg")
        >>> result = await generator.generate(request)
        >>> result.name
        'bright-sky'
    """

    def __init__(
        self,
        ledger: NameLedger,
        settings: Settings | None = None,
        strategies: Sequence[NameStrategy] | None = None,
    ):
        self.ledger = ledger
        self.settings = settings or get_settings()
        self.strategies = list(strategies) if strategies is not None else default_strategies()
        if not self.strategies or not self.strategies[-1].terminal:
            self.strategies.append(AbsoluteFallbackStrategy())

    def build_context(self, request: GenerationRequest, today: dt.date | None = None) -> GenerationContext:
        pools = resolve_word_pools(request.preset, request.word_banks, request.resolution_mode)
        return GenerationContext(
            request=request,
            pools=pools,
            ledger=self.ledger,
            rng=SeededRNG(request.seed),
            max_length=_pick(request.max_length, self.settings.max_filename_length),
            max_retries=_pick(request.max_retries, self.settings.max_retries),
            counter_probe_limit=self.settings.counter_probe_limit,
            hash_attempts=self.settings.hash_fallback_attempts,
            strip_diacritics=_pick(request.strip_diacritics, self.settings.strip_diacritics),
            ascii_only=_pick(request.ascii_only, self.settings.ascii_only),
            today=today or dt.date.today(),
        )

    async def generate(self, request: GenerationRequest) -> GeneratedName:
        """Generate a name unique against the session set and the ledger.

        Raises:
            InsufficientWordBanksError: No adjective or noun banks are usable.
            NoWordsAvailableError: The usable banks contain no words.
        """
        ctx = self.build_context(request)

        for strategy in self.strategies:
            result = await strategy.attempt(ctx)
            if result is not None:
                logger.debug(
                    f"[Generator] preset={request.preset.id} strategy={strategy.name} "
                    f"name={result.name}{request.extension}"
                )
                return result
            logger.warning(
                f"[Generator] Strategy '{strategy.name}' exhausted for preset={request.preset.id}, "
                f"falling back"
            )

        # The chain always ends with a terminal strategy
        raise RuntimeError("Unexpected end of name strategy chain")
