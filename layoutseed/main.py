"""Entry points: logging setup and a settings-backed generator factory."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any

from dotenv import load_dotenv

from layoutseed.config import Settings, settings
from layoutseed.engine.config import GeneratorConfig
from layoutseed.engine.generator import Generator, OnPlacement
from layoutseed.engine.randomness import RandomSource
from layoutseed.engine.registry import PossibilityRegistry


def configure_logging(level: str | None = None) -> None:
    """Load .env and configure root logging at the configured level."""
    load_dotenv()
    name = (level or settings.layoutseed_log_level).upper()
    logging.basicConfig(
        level=getattr(logging, name, logging.INFO),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )


def create_generator(
    possibilities: PossibilityRegistry | Mapping[str, Any],
    random: RandomSource | Callable[[], float] | None = None,
    on_placement: OnPlacement | None = None,
    config: GeneratorConfig | None = None,
    app_settings: Settings | None = None,
) -> Generator:
    """Build a Generator, taking engine config from settings unless given."""
    if config is None:
        config = GeneratorConfig.from_settings(app_settings or settings)
    return Generator(possibilities, random=random, on_placement=on_placement, config=config)
