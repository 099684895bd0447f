from dataclasses import dataclass
from enum import Enum


class LengthPolicy(Enum):
    STRICT = "strict"
    TRUNCATE = "truncate"


class MismatchPolicy(Enum):
    RAISE = "raise"
    KEEP_PRIMARY = "keep_primary"


@dataclass(frozen=True)
class AlignmentConfig:
    """How position-wise operations treat inputs that do not line up.

    length_policy: STRICT raises LengthMismatch. TRUNCATE stops at the
    shorter input, the way a plain zip does, and logs a warning.

    on_mismatch (batch combine only): RAISE propagates the TokenMismatch.
    KEEP_PRIMARY keeps the primary sentence unmerged for the failing pair,
    logs a warning and goes on with the rest of the batch.
    """

    length_policy: LengthPolicy = LengthPolicy.STRICT
    on_mismatch: MismatchPolicy = MismatchPolicy.RAISE

    @property
    def strict(self) -> bool:
        return self.length_policy is LengthPolicy.STRICT

    @classmethod
    def from_name(cls, name: str, on_mismatch: str = "raise") -> "AlignmentConfig":
        try:
            policy = LengthPolicy(name.strip().lower())
        except ValueError:
            choices = ", ".join(p.value for p in LengthPolicy)
            raise ValueError(f"Unknown length policy {name!r} (expected one of: {choices})")
        try:
            mismatch = MismatchPolicy(on_mismatch.strip().lower())
        except ValueError:
            choices = ", ".join(p.value for p in MismatchPolicy)
            raise ValueError(f"Unknown mismatch policy {on_mismatch!r} (expected one of: {choices})")
        return cls(length_policy=policy, on_mismatch=mismatch)


DEFAULT_ALIGNMENT = AlignmentConfig()
