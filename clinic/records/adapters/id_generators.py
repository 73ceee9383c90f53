import uuid

ID_SUFFIX_LENGTH = 8


def random_id(prefix: str) -> str:
    """``PAT`` → ``PAT1F3A9C0E``: prefix plus the first 8 hex digits of a UUID4, uppercased."""
    return prefix + uuid.uuid4().hex[:ID_SUFFIX_LENGTH].upper()


class SequentialIdGenerator:
    """Deterministic generator: ``PAT00000001``, ``PAT00000002``, ...

    One counter per prefix. Useful wherever ids must be predictable.
    """

    def __init__(self) -> None:
        self._counters: dict[str, int] = {}

    def __call__(self, prefix: str) -> str:
        self._counters[prefix] = self._counters.get(prefix, 0) + 1
        return f"{prefix}{self._counters[prefix]:0{ID_SUFFIX_LENGTH}d}"
