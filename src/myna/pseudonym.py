"""Keyed pseudonymization of Myna numbers.

A token is derived as ``HMAC-SHA256(secret, str(myna))``; the first 16 bytes
of the digest are stamped with the UUID version 4 and RFC 4122 variant bits
and rendered in the usual 8-4-4-4-12 lowercase hex form.  The token is a
deterministic function of the secret and the number; it only looks like a
random UUID.

Security notes
--------------
Only 122 bits of the digest survive the version/variant stamp.  No other
digest bytes are mixed in, so tokens stay reproducible across releases.
The secret is never logged, printed or included in ``repr``.
"""

from __future__ import annotations

import hashlib
import hmac
import uuid
from collections.abc import Iterable, Iterator

from .config import ConfigModel
from .errors import ConfigError
from .identifier import Myna
from .utils.logging import get_logger

log = get_logger(__name__)


def get_secret_bytes(cfg: ConfigModel, *, require: bool = False) -> bytes:
    """Return the configured secret as UTF-8 bytes.

    Parameters
    ----------
    cfg:
        Configuration model holding the pseudonym seed.
    require:
        If ``True`` and the secret is missing or empty, :class:`ConfigError`
        is raised.  Otherwise an empty byte string is returned.
    """

    secret = cfg.pseudonyms.seed.secret
    value = secret.get_secret_value().strip() if secret is not None else ""
    if not value and require:
        raise ConfigError(
            f"Missing pseudonym secret; set {cfg.pseudonyms.seed.secret_env} or pass it explicitly"
        )
    return value.encode("utf-8")


class Pseudonymizer:
    """Derive stable UUID-shaped tokens from Myna numbers."""

    __slots__ = ("_secret",)

    def __init__(self, secret: bytes | str) -> None:
        if isinstance(secret, str):
            secret = secret.encode("utf-8")
        self._secret = bytes(secret)

    @classmethod
    def from_config(cls, cfg: ConfigModel, *, require: bool = True) -> Pseudonymizer:
        """Build a pseudonymizer from the secret held by ``cfg``."""

        return cls(get_secret_bytes(cfg, require=require))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(secret=<redacted>)"

    def digest(self, myna: Myna) -> bytes:
        """Return the 32 byte HMAC-SHA256 digest of ``str(myna)``."""

        return hmac.new(self._secret, myna.format().encode("ascii"), hashlib.sha256).digest()

    def derive(self, myna: Myna) -> str:
        """Return the 36 character token for ``myna``."""

        # version=4 sets byte 6 to (b & 0x0F) | 0x40 and byte 8 to (b & 0x3F) | 0x80
        return str(uuid.UUID(bytes=self.digest(myna)[:16], version=4))

    def derive_text(self, text: str) -> str:
        """Parse ``text`` and derive its token; parse errors propagate."""

        return self.derive(Myna.parse(text))

    def get_line(self, myna: Myna) -> str:
        """Return ``"<number> <token>\\n"``."""

        return f"{myna} {self.derive(myna)}\n"

    def lines(self, mynas: Iterable[Myna]) -> Iterator[str]:
        """Yield :meth:`get_line` for each value of ``mynas``."""

        count = 0
        for myna in mynas:
            yield self.get_line(myna)
            count += 1
        log.debug("Derived %d tokens", count)


__all__ = ["Pseudonymizer", "get_secret_bytes"]
