"""Factory functions for creating dictionary engines.

There is no shared module-level engine: every caller builds and owns its own
instance through new_engine().
"""

from collections.abc import Mapping
from typing import Optional

from core.config import Settings, settings as app_settings
from core.logging import get_module_logger
from polyglot.engine import Polyglot
from polyglot.models import DEFAULT_SEED

logger = get_module_logger(__name__)


def new_engine(
    seed_translations: Optional[Mapping] = None,
    preferred_language: Optional[str] = None,
    settings: Optional[Settings] = None,
) -> Polyglot:
    """Create and configure a Polyglot engine.

    The engine is seeded with the reserved missing-translation entry, then
    seed_translations are bulk-added, then the preferred language is
    selected. Selecting it last lets seed data introduce a language before
    it becomes the default.

    Args:
        seed_translations: Optional ``{identifier: {language: text}}`` mapping
            added on top of the reserved entry.
        preferred_language: Default language (default:
            settings.polyglot.PREFERRED_LANGUAGE).
        settings: Application settings (default: core.config.settings).

    Returns:
        Polyglot: Configured engine instance.

    Raises:
        ValidationError: If seed data or preferred_language is malformed.
        ConflictError: If seed data redefines a reserved translation.
        ConsistencyError: If preferred_language is not fully supported.

    Usage:
        engine = new_engine()

        engine = new_engine(
            seed_translations={"Greeting": {"en": "Hello", "de": "Hallo", "ru": "Привет"}},
            preferred_language="de",
        )
    """
    polyglot_settings = (settings or app_settings).polyglot
    engine = Polyglot(settings=polyglot_settings, seed=False)
    engine.add_all(DEFAULT_SEED)

    if seed_translations:
        engine.add_all(seed_translations)

    engine.set_preferred_language(
        preferred_language or polyglot_settings.PREFERRED_LANGUAGE
    )

    logger.info(
        "engine_created",
        identifier_count=len(engine.store),
        available_languages=engine.available_languages,
        preferred_language=engine.preferred_language,
    )
    return engine
