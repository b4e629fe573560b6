"""Weighted checks built from sub-signals."""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from docverify.exceptions import ProfileError
from docverify.models.results import CheckResult
from docverify.validation.matchers import Matcher


class ScoreMode(str, Enum):
    """How matched sub-signal points combine into a check score."""

    SUM = "sum"  # Points of every matched signal add up
    BEST = "best"  # Only the highest-point matched signal counts


@dataclass(frozen=True)
class SubSignal:
    """A named presence test worth a fixed number of points."""

    name: str
    matcher: Matcher
    points: int


@dataclass(frozen=True)
class Check:
    """A named, weighted test of document text.

    The score is the combined points of matched sub-signals, capped at
    ``max_score``. The check passes when the score reaches ``pass_bar``.
    Each sub-signal is tested once, so repeated phrasing is never counted
    twice.
    """

    name: str
    max_score: int
    pass_bar: int
    signals: tuple[SubSignal, ...]
    mode: ScoreMode = ScoreMode.SUM
    count_label: str | None = None  # Report "Found n/N <label>" instead of a signal list

    def __post_init__(self):
        if self.max_score <= 0:
            raise ProfileError(f"Check '{self.name}' must have a positive max score")
        if not 0 < self.pass_bar <= self.max_score:
            raise ProfileError(
                f"Check '{self.name}' pass bar {self.pass_bar} outside 1..{self.max_score}"
            )
        if not self.signals:
            raise ProfileError(f"Check '{self.name}' has no sub-signals")
        if any(s.points <= 0 for s in self.signals):
            raise ProfileError(f"Check '{self.name}' has a sub-signal without points")
        if self.reachable_score < self.pass_bar:
            raise ProfileError(
                f"Check '{self.name}' can never pass: best score {self.reachable_score} "
                f"is below pass bar {self.pass_bar}"
            )

    @property
    def reachable_score(self) -> int:
        """Highest score the check can award."""
        return self._combine(list(self.signals))

    def run(self, text: str) -> CheckResult:
        """Run the check against document text.

        Args:
            text: Full extracted document text

        Returns:
            CheckResult with score and rationale
        """
        matched = [s for s in self.signals if s.matcher.matches(text)]
        score = self._combine(matched)

        return CheckResult(
            name=self.name,
            passed=score >= self.pass_bar,
            score=score,
            max_score=self.max_score,
            details=self._describe(matched),
            matched=tuple(s.name for s in matched),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "name": self.name,
            "max_score": self.max_score,
            "pass_bar": self.pass_bar,
            "mode": self.mode.value,
            "signals": [
                {"name": s.name, "points": s.points, "matcher": s.matcher.describe()}
                for s in self.signals
            ],
        }

    def _combine(self, matched: list[SubSignal]) -> int:
        if not matched:
            return 0
        if self.mode == ScoreMode.BEST:
            raw = max(s.points for s in matched)
        else:
            raw = sum(s.points for s in matched)
        return min(raw, self.max_score)

    def _describe(self, matched: list[SubSignal]) -> str:
        """Build the rationale naming found and missing sub-signals."""
        found = [s.name for s in matched]
        missing = [s.name for s in self.signals if s not in matched]

        if self.count_label:
            summary = f"Found {len(found)}/{len(self.signals)} {self.count_label}"
            return f"{summary}: {', '.join(found)}" if found else summary

        if not found:
            return f"Not found: {', '.join(missing)}"

        details = f"Found: {', '.join(found)}"
        if missing:
            details += f"; missing: {', '.join(missing)}"
        if self.mode == ScoreMode.BEST and len(matched) > 1:
            best = max(matched, key=lambda s: s.points)
            details += f"; scored on {best.name}"
        return details
