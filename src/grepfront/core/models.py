"""Domain models for grepfront.

All models are **frozen** dataclasses built once at process start and
read-only afterwards.  They carry zero I/O and zero dependencies on
external packages.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass, field
from enum import Enum


# ---------------------------------------------------------------------------
# Handler outcome
# ---------------------------------------------------------------------------

class OutcomeKind(Enum):
    """How a dispatched invocation ended."""

    SUCCESS = "success"
    NOT_IMPLEMENTED = "not_implemented"
    DELEGATED = "delegated"


@dataclass(frozen=True, slots=True)
class Outcome:
    """Tagged result of a handler invocation.

    ``code`` is meaningful only for :attr:`OutcomeKind.DELEGATED`, where
    it carries the exit code reported by the real subcommand.
    """

    kind: OutcomeKind
    code: int = 0

    @classmethod
    def success(cls) -> Outcome:
        return cls(OutcomeKind.SUCCESS)

    @classmethod
    def not_implemented(cls) -> Outcome:
        return cls(OutcomeKind.NOT_IMPLEMENTED)

    @classmethod
    def delegated(cls, code: int) -> Outcome:
        return cls(OutcomeKind.DELEGATED, code)


# ---------------------------------------------------------------------------
# Session context
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class SessionContext:
    """Per-process context resolved before any handler runs."""

    subcommand: str
    """Name of the subcommand being invoked."""

    app_token: str | None = None
    """Credential for the remote service, or ``None`` when anonymous."""

    user_agent_tags: frozenset[str] = frozenset()
    """Tags appended to the user agent of outgoing requests."""

    features: dict[str, str] = field(default_factory=dict)
    """Feature values recorded for telemetry."""

    in_docker: bool = False
    engine_path: str = "grepfront-core"

    @property
    def authenticated(self) -> bool:
        return self.app_token is not None


Handler = Callable[[Sequence[str], SessionContext], Outcome]
"""A subcommand handler: rewritten argv plus session context in, outcome out."""


# ---------------------------------------------------------------------------
# Subcommand table
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Subcommand:
    """One routable subcommand."""

    name: str
    description: str
    """One-line summary shown in the top-level help."""

    handler: Handler


@dataclass(frozen=True, slots=True)
class SubcommandTable:
    """Ordered, immutable table of subcommands plus the default.

    This is the single source for membership checks, routing, and help
    rendering, so the set of known names can never drift from the set
    of routable ones.
    """

    entries: tuple[Subcommand, ...]
    default: str

    def __post_init__(self) -> None:
        names = [entry.name for entry in self.entries]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise ValueError(f"Duplicate subcommand names: {', '.join(duplicates)}")
        if self.default not in names:
            raise ValueError(
                f"Default subcommand {self.default!r} is not in the table.",
            )

    def __contains__(self, name: object) -> bool:
        return any(entry.name == name for entry in self.entries)

    def __iter__(self) -> Iterator[Subcommand]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(entry.name for entry in self.entries)

    def get(self, name: str) -> Subcommand | None:
        """Return the entry called *name*, or ``None``."""
        for entry in self.entries:
            if entry.name == name:
                return entry
        return None


# ---------------------------------------------------------------------------
# Resolution results
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class HelpRequest:
    """The bare ``prog -h`` / ``prog --help`` form was given."""


@dataclass(frozen=True, slots=True)
class Invocation:
    """A selected subcommand together with its rewritten argument vector."""

    subcommand: str
    argv: tuple[str, ...]
    """``(<program>-<subcommand>, *subcommand_args)``."""

    @property
    def program_identity(self) -> str:
        """Synthetic sub-program name, e.g. ``grepfront-scan``."""
        return self.argv[0]

    @property
    def args(self) -> tuple[str, ...]:
        return self.argv[1:]


# ---------------------------------------------------------------------------
# Scan request
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ScanRequest:
    """Parsed options of a ``scan`` invocation."""

    configs: tuple[str, ...]
    """Rule configurations (``auto``, a path, or a registry id)."""

    targets: tuple[str, ...]
    """Files or directories to scan."""

    json_output: bool = False
    verbosity: int = 0
    """``-1`` quiet, ``0`` normal, ``1`` verbose."""
