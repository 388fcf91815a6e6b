from types import MappingProxyType
from typing import Iterable, Mapping, Optional

from vimeo_proxy.domain.errors import UnauthorizedError


class TokenTable:
    """
    Read-only map of caller secret -> album id.
    A `None` album means the caller lists the default project instead.

    Lookups are a plain dict hit: no constant-time comparison, no expiry
    and no rotation. Secrets are fixed for the life of the process.
    """

    def __init__(self, entries: Mapping[str, Optional[str]]):
        self._entries = MappingProxyType(dict(entries))

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[str, Optional[str]]]) -> "TokenTable":
        entries: dict[str, Optional[str]] = {}
        for secret, collection_id in pairs:
            if not secret:
                continue
            # first slot wins on duplicated secrets
            entries.setdefault(secret, collection_id or None)
        return cls(entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, token: object) -> bool:
        return token in self._entries

    def resolve(self, token: Optional[str]) -> Optional[str]:
        if not token or token not in self._entries:
            raise UnauthorizedError()
        return self._entries[token]
