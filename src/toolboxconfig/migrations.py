"""Schema migrations for toolbox configuration documents.

Each migrator upgrades a parsed document by exactly one version, from N to
N+1. A ``MigrationChain`` holds one migrator per adjacent version pair and
applies them by repeated lookup until the document reaches the latest
version. Adding a schema version means adding one entry to ``MIGRATIONS``
and bumping ``LATEST_KNOWN_VERSION``; existing migrators never change.

The chain never guesses: a version below the earliest or above the latest
known version is rejected before any transform runs.
"""

import copy
import logging
from collections.abc import Callable, Mapping
from typing import Any

from .errors import ConfigVersionError
from .schema import EARLIEST_KNOWN_VERSION, LATEST_KNOWN_VERSION

logger = logging.getLogger(__name__)

# Takes a document valid at version N, returns a new document valid at N+1
Migrator = Callable[[dict], dict]

# Keyed by source version. Empty while version 1 is the only published schema.
MIGRATIONS: dict[int, Migrator] = {}


def read_version(document: Mapping[str, Any]) -> int:
    """Read the schema version of an unvalidated document.

    Accepts the same primitive spellings the validator coerces: ints,
    integral floats and numeric strings. Booleans are rejected.

    Raises:
        ConfigVersionError: If the version is missing or not an integer.
    """
    raw = document.get("version")
    if raw is None:
        raise ConfigVersionError("document has no version", version=None)
    if isinstance(raw, bool):
        raise ConfigVersionError(f"unrecognized version {raw!r}", version=raw)
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float) and raw.is_integer():
        return int(raw)
    if isinstance(raw, str):
        try:
            return int(raw.strip())
        except ValueError:
            pass
        try:
            as_float = float(raw)
        except ValueError:
            pass
        else:
            if as_float.is_integer():
                return int(as_float)
    raise ConfigVersionError(f"unrecognized version {raw!r}", version=raw)


class MigrationChain:
    """Ordered single-step migrators covering ``[earliest, latest]``.

    Args:
        earliest: Oldest version the chain accepts.
        latest: Version every migrated document ends up at.
        steps: Migrator per source version. Must cover every version in
            ``[earliest, latest)`` and nothing else.
    """

    def __init__(
        self,
        earliest: int = EARLIEST_KNOWN_VERSION,
        latest: int = LATEST_KNOWN_VERSION,
        steps: Mapping[int, Migrator] | None = None,
    ):
        if earliest > latest:
            raise ValueError(f"earliest ({earliest}) must not exceed latest ({latest})")
        steps = dict(steps or {})

        missing = [v for v in range(earliest, latest) if v not in steps]
        if missing:
            raise ValueError(f"No migration registered from version(s) {missing}")
        stray = sorted(v for v in steps if not earliest <= v < latest)
        if stray:
            raise ValueError(f"Migration(s) registered outside [{earliest}, {latest}): {stray}")

        self.earliest = earliest
        self.latest = latest
        self._steps = steps

    def check_version(self, version: int) -> None:
        """Raise ConfigVersionError if *version* is outside the known range."""
        if not self.earliest <= version <= self.latest:
            raise ConfigVersionError(
                f"version {version} is outside the known range "
                f"[{self.earliest}, {self.latest}]",
                version=version,
                earliest=self.earliest,
                latest=self.latest,
            )

    def migrate(self, document: dict) -> dict:
        """Upgrade *document* to the latest version.

        A document already at the latest version is returned as-is. Otherwise
        the input is copied once and left untouched.

        Raises:
            ConfigVersionError: If the version is unusable or a migrator does
                not produce the next version.
        """
        version = read_version(document)
        self.check_version(version)
        if version == self.latest:
            return document

        start = version
        current = copy.deepcopy(document)
        while version < self.latest:
            current = self._steps[version](current)
            produced = read_version(current)
            if produced != version + 1:
                raise ConfigVersionError(
                    f"migration from version {version} produced version "
                    f"{produced}, expected {version + 1}",
                    version=produced,
                    earliest=self.earliest,
                    latest=self.latest,
                )
            logger.debug("Migrated config document from version %d to %d", version, produced)
            version = produced

        logger.info("Upgraded config document from version %d to %d", start, self.latest)
        return current


DEFAULT_CHAIN = MigrationChain(EARLIEST_KNOWN_VERSION, LATEST_KNOWN_VERSION, MIGRATIONS)


def migrate_to_latest(document: dict) -> dict:
    """Upgrade *document* with the built-in migrations."""
    return DEFAULT_CHAIN.migrate(document)
