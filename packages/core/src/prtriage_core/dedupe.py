from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class DedupeTracker:
    """Identifiers of pull requests already triaged by this process.

    Immutable: record() returns a new tracker, so the triage loop threads the
    value through each cycle instead of mutating shared state. Starts empty on
    every process start and is never persisted.
    """

    identifiers: frozenset[str] = field(default_factory=frozenset)

    def __contains__(self, identifier: object) -> bool:
        return identifier in self.identifiers

    def __len__(self) -> int:
        return len(self.identifiers)

    def record(self, identifier: str) -> DedupeTracker:
        if identifier in self.identifiers:
            return self
        return DedupeTracker(self.identifiers | {identifier})
