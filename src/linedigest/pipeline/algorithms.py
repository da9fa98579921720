# topmark:header:start
#
#   project      : LineDigest
#   file         : algorithms.py
#   file_relpath : src/linedigest/pipeline/algorithms.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Digest algorithm table.

| Algorithm | Selector | Digest bytes | Hex characters |
|-----------|----------|--------------|----------------|
| MD5       | `md5`    | 16           | 32             |
| SHA-1     | `sha1`   | 20           | 40             |
| SHA-256   | `sha256` | 32           | 64             |

Digest contexts are created through `hashlib.new` so that a backend which refuses
an algorithm (e.g. a FIPS-restricted OpenSSL build rejecting MD5) surfaces as a
`DigestBackendError` instead of a bare `ValueError`.
"""

from __future__ import annotations

import hashlib
from enum import Enum
from typing import TYPE_CHECKING, Final

from linedigest.config.logging import get_logger
from linedigest.core.errors import DigestBackendError

if TYPE_CHECKING:
    from hashlib import _Hash

    from linedigest.config.logging import LineDigestLogger

logger: LineDigestLogger = get_logger(__name__)


class DigestAlgorithm(str, Enum):
    """Supported line digest algorithms, keyed by their CLI/config selector."""

    MD5 = "md5"
    SHA1 = "sha1"
    SHA256 = "sha256"

    @property
    def label(self) -> str:
        """Human-readable algorithm name (e.g. ``SHA-256``)."""
        return _LABELS[self]

    @property
    def digest_size(self) -> int:
        """Length of the raw digest in bytes."""
        return _DIGEST_SIZES[self]

    @property
    def hex_length(self) -> int:
        """Length of the hex-encoded digest in characters."""
        return 2 * self.digest_size

    @classmethod
    def parse(cls, name: str) -> DigestAlgorithm:
        """Return the algorithm matching ``name``.

        Matching ignores case, dashes and underscores, so ``SHA-256``, ``sha_256``
        and ``sha256`` all select `SHA256`.

        Args:
            name (str): Selector or label of the algorithm.

        Returns:
            DigestAlgorithm: The matching member.

        Raises:
            ValueError: If ``name`` does not name a supported algorithm.
        """
        key: str = name.strip().lower().replace("-", "").replace("_", "")
        for member in cls:
            if member.value == key:
                return member
        raise ValueError(
            f"Unsupported digest algorithm {name!r}; expected one of: "
            + ", ".join(m.value for m in cls)
        )

    def new(self) -> _Hash:
        """Create a fresh digest context for this algorithm.

        Returns:
            _Hash: An empty hashlib digest context.

        Raises:
            DigestBackendError: If the backend cannot provide the algorithm or the
                context it returns does not have the expected digest size.
        """
        try:
            # Line digests are checksums, not security primitives.
            ctx: _Hash = hashlib.new(self.value, usedforsecurity=False)
        except ValueError as exc:
            logger.error("Digest backend rejected %s: %s", self.label, exc)
            raise DigestBackendError(f"Cannot initialize {self.label} digest: {exc}") from exc

        if ctx.digest_size != self.digest_size:
            raise DigestBackendError(
                f"{self.label} backend returned a {ctx.digest_size}-byte digest "
                f"(expected {self.digest_size})"
            )
        return ctx


_LABELS: Final[dict[DigestAlgorithm, str]] = {
    DigestAlgorithm.MD5: "MD5",
    DigestAlgorithm.SHA1: "SHA-1",
    DigestAlgorithm.SHA256: "SHA-256",
}

_DIGEST_SIZES: Final[dict[DigestAlgorithm, int]] = {
    DigestAlgorithm.MD5: 16,
    DigestAlgorithm.SHA1: 20,
    DigestAlgorithm.SHA256: 32,
}

DEFAULT_ALGORITHM: Final[DigestAlgorithm] = DigestAlgorithm.MD5
