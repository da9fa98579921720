# topmark:header:start
#
#   project      : LineDigest
#   file         : model.py
#   file_relpath : src/linedigest/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model for LineDigest (immutable runtime view + mutable builder).

Layering, lowest precedence first:

1. runtime defaults (`linedigest.config.io.load_defaults_dict`);
2. discovered files in the working directory (``pyproject.toml`` then
   ``linedigest.toml``), unless discovery is disabled;
3. explicit ``--config`` files, in the order given;
4. environment variables and CLI flags (applied by the CLI through
   `MutableConfig.apply_overrides`).

`MutableConfig.freeze` validates the merged draft and returns a `Config`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from linedigest.config.io import (
    discover_local_config_files,
    extract_linedigest_table,
    load_defaults_dict,
    load_toml_dict,
)
from linedigest.config.keys import Toml
from linedigest.config.logging import get_logger
from linedigest.config.policy import OverflowPolicy
from linedigest.constants import MIN_BUFFER_SIZE
from linedigest.core.errors import ConfigError
from linedigest.pipeline.algorithms import DigestAlgorithm

if TYPE_CHECKING:
    from collections.abc import Iterable

    from linedigest.config.io import TomlTable
    from linedigest.config.logging import LineDigestLogger

logger: LineDigestLogger = get_logger(__name__)


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration for a LineDigest run.

    Attributes:
        algorithm (DigestAlgorithm): Digest algorithm applied to every line.
        buffer_size (int): Maximum number of bytes read per line, terminator included.
        overflow (OverflowPolicy): Treatment of lines longer than ``buffer_size``.
        config_files (tuple[Path | str, ...]): Config sources merged into this snapshot.
    """

    algorithm: DigestAlgorithm
    buffer_size: int
    overflow: OverflowPolicy
    config_files: tuple[Path | str, ...] = ()

    def to_toml_dict(self) -> TomlTable:
        """Return the effective settings as a TOML-serializable dict."""
        return {
            Toml.KEY_ALGORITHM: self.algorithm.value,
            Toml.KEY_BUFFER_SIZE: self.buffer_size,
            Toml.KEY_OVERFLOW: self.overflow.value,
        }

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this configuration."""
        return MutableConfig(
            algorithm=self.algorithm,
            buffer_size=self.buffer_size,
            overflow=self.overflow,
            config_files=list(self.config_files),
        )


# -------------------------- Mutable builder --------------------------


@dataclass
class MutableConfig:
    """Mutable configuration used during discovery and merging.

    ``None`` means *unset*: the value is inherited from lower-precedence layers
    when merging.

    Attributes:
        algorithm (DigestAlgorithm | None): Digest algorithm.
        buffer_size (int | None): Line buffer capacity in bytes.
        overflow (OverflowPolicy | None): Overflow policy.
        config_files (list[Path | str]): Config sources merged into this draft.
    """

    algorithm: DigestAlgorithm | None = None
    buffer_size: int | None = None
    overflow: OverflowPolicy | None = None
    config_files: list[Path | str] = field(default_factory=lambda: [])

    # ---------------------------- Build/freeze ----------------------------
    def freeze(self) -> Config:
        """Validate this draft and freeze it into an immutable `Config`.

        Unset values fall back to the runtime defaults.

        Raises:
            ConfigError: If the buffer size is below the supported minimum.
        """
        draft: MutableConfig = MutableConfig.from_defaults().merge_with(self)
        # from_defaults() always sets every field
        assert draft.algorithm is not None
        assert draft.buffer_size is not None
        assert draft.overflow is not None

        if draft.buffer_size < MIN_BUFFER_SIZE:
            raise ConfigError(
                f"buffer_size must be at least {MIN_BUFFER_SIZE} bytes (got {draft.buffer_size})"
            )

        return Config(
            algorithm=draft.algorithm,
            buffer_size=draft.buffer_size,
            overflow=draft.overflow,
            config_files=tuple(self.config_files),
        )

    # --------------------------- Loaders/parsers --------------------------
    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a draft populated with the runtime defaults."""
        return cls.from_toml_dict(load_defaults_dict(), config_file=None)

    @classmethod
    def from_toml_dict(cls, data: TomlTable, *, config_file: Path | None = None) -> MutableConfig:
        """Build a draft from a flat LineDigest TOML table.

        Args:
            data (TomlTable): Parsed table (``linedigest.toml`` or ``[tool.linedigest]``).
            config_file (Path | None): Source of ``data``, recorded for provenance.

        Returns:
            MutableConfig: The draft; keys missing from ``data`` stay unset.

        Raises:
            ConfigError: If a value has the wrong type or is not a known choice.
        """
        source: str = str(config_file) if config_file is not None else "defaults"
        draft = cls()
        if config_file is not None:
            draft.config_files.append(config_file)

        for key in data:
            if key not in Toml.ALL_KEYS:
                logger.warning("Ignoring unknown config key %r in %s", key, source)

        raw_algorithm: Any = data.get(Toml.KEY_ALGORITHM)
        if raw_algorithm is not None:
            if not isinstance(raw_algorithm, str):
                raise ConfigError(f"{source}: '{Toml.KEY_ALGORITHM}' must be a string")
            try:
                draft.algorithm = DigestAlgorithm.parse(raw_algorithm)
            except ValueError as exc:
                raise ConfigError(f"{source}: {exc}") from exc

        raw_size: Any = data.get(Toml.KEY_BUFFER_SIZE)
        if raw_size is not None:
            # bool is an int subclass; reject `buffer_size = true`
            if isinstance(raw_size, bool) or not isinstance(raw_size, int):
                raise ConfigError(f"{source}: '{Toml.KEY_BUFFER_SIZE}' must be an integer")
            draft.buffer_size = raw_size

        raw_overflow: Any = data.get(Toml.KEY_OVERFLOW)
        if raw_overflow is not None:
            if not isinstance(raw_overflow, str):
                raise ConfigError(f"{source}: '{Toml.KEY_OVERFLOW}' must be a string")
            try:
                draft.overflow = OverflowPolicy.parse(raw_overflow)
            except ValueError as exc:
                raise ConfigError(f"{source}: {exc}") from exc

        return draft

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig | None:
        """Load a draft from ``linedigest.toml`` or ``pyproject.toml``.

        Returns:
            MutableConfig | None: The draft, or ``None`` for a ``pyproject.toml``
            without a ``[tool.linedigest]`` table.
        """
        table: TomlTable | None = extract_linedigest_table(path, load_toml_dict(path))
        if table is None:
            return None
        logger.debug("Loaded config from %s: %s", path, table)
        return cls.from_toml_dict(table, config_file=path)

    @classmethod
    def load_merged(
        cls,
        *,
        cwd: Path | None = None,
        extra_config_files: Iterable[Path | str] = (),
        discover: bool = True,
    ) -> MutableConfig:
        """Merge defaults, discovered files and explicit config files.

        Args:
            cwd (Path | None): Directory searched for config files (default: CWD).
            extra_config_files (Iterable[Path | str]): Explicit files; later ones win.
            discover (bool): Whether to look for config files in ``cwd``.

        Returns:
            MutableConfig: The merged draft (not yet frozen).
        """
        draft: MutableConfig = cls.from_defaults()

        if discover:
            for path in discover_local_config_files(cwd or Path.cwd()):
                mc: MutableConfig | None = cls.from_toml_file(path)
                if mc is not None:
                    draft = draft.merge_with(mc)

        for extra in extra_config_files:  # explicit files override discovered ones
            mc = cls.from_toml_file(Path(extra))
            if mc is not None:
                draft = draft.merge_with(mc)

        return draft

    # ------------------------------- Merging -------------------------------
    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new draft where values set in ``other`` override this draft."""
        return MutableConfig(
            algorithm=other.algorithm if other.algorithm is not None else self.algorithm,
            buffer_size=other.buffer_size if other.buffer_size is not None else self.buffer_size,
            overflow=other.overflow if other.overflow is not None else self.overflow,
            config_files=self.config_files + other.config_files,
        )

    def apply_overrides(
        self,
        *,
        algorithm: DigestAlgorithm | None = None,
        buffer_size: int | None = None,
        overflow: OverflowPolicy | None = None,
    ) -> MutableConfig:
        """Apply explicit overrides (CLI flags, environment) in place.

        ``None`` arguments leave the current value untouched.

        Returns:
            MutableConfig: ``self``, for chaining.
        """
        if algorithm is not None:
            self.algorithm = algorithm
        if buffer_size is not None:
            self.buffer_size = buffer_size
        if overflow is not None:
            self.overflow = overflow
        return self
