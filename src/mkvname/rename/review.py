"""
Human review of proposed filenames.

Each file goes through a small state machine:

    Proposed -> Accepted
             -> Choosing -> Chosen | ManualEntry | Skipped

A file with no automatic proposal starts directly in Choosing, so the user can
still type a name or skip it. The outcome is returned as a ReviewDecision and
applied to the file with `apply_decision`.

Reviewers are small objects with three questions (confirm, choose, enter a
title). `ConsoleReviewer` asks them on the terminal, `AutoReviewer` answers
them without user interaction.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Protocol

from mkvname.rename import resolver
from mkvname.rename.media import MediaFile
from mkvname.utils import MANUAL_CHOICE, SKIP_CHOICE, LogLevel, file_util, logger


class ReviewOutcome(Enum):
    ACCEPTED = "accepted"
    CHOSEN = "chosen"
    MANUAL_ENTRY = "manual"
    SKIPPED = "skipped"


@dataclass(frozen=True)
class ReviewDecision:
    """Result of reviewing one file; `base_title` is None only when skipped."""

    outcome: ReviewOutcome
    base_title: str | None = None

    @classmethod
    def accepted(cls, base_title: str) -> "ReviewDecision":
        return cls(ReviewOutcome.ACCEPTED, base_title)

    @classmethod
    def chosen(cls, base_title: str) -> "ReviewDecision":
        return cls(ReviewOutcome.CHOSEN, base_title)

    @classmethod
    def manual(cls, base_title: str) -> "ReviewDecision":
        return cls(ReviewOutcome.MANUAL_ENTRY, base_title)

    @classmethod
    def skipped(cls) -> "ReviewDecision":
        return cls(ReviewOutcome.SKIPPED)


class Reviewer(Protocol):
    def confirm(self, media: MediaFile, proposal: str) -> bool:
        """Return True to accept `proposal` as the new filename."""

    def choose(self, media: MediaFile, options: list[str]) -> str:
        """Return one of `options`."""

    def enter_title(self, media: MediaFile) -> str:
        """Return a free-text base title; blank means skip."""


def build_options(media: MediaFile) -> list[str]:
    """Options offered while choosing: skip, every candidate in order, manual entry."""
    return [SKIP_CHOICE, *media.results, MANUAL_CHOICE]


def review_file(media: MediaFile, reviewer: Reviewer) -> ReviewDecision:
    """Drive the review of `media` with `reviewer` and return the decision."""
    candidate = resolver.select_candidate(media)
    if candidate is not None:
        proposal = resolver.compose_with_base(media, candidate)
        if reviewer.confirm(media, proposal):
            return ReviewDecision.accepted(candidate)

    choice = reviewer.choose(media, build_options(media))
    if choice == SKIP_CHOICE:
        return ReviewDecision.skipped()
    if choice == MANUAL_CHOICE:
        title = file_util.sanitize_filename(reviewer.enter_title(media))
        if not title:
            return ReviewDecision.skipped()
        return ReviewDecision.manual(title)
    if choice not in media.results:
        raise ValueError(f"'{choice}' is not a candidate for {media.original}")
    return ReviewDecision.chosen(choice)


def apply_decision(media: MediaFile, decision: ReviewDecision) -> str | None:
    """Set `media.chosen_name` from `decision` and return it."""
    media.chosen_name = resolver.compose_with_base(media, decision.base_title)
    logger.log(
        "review.decision",
        LogLevel.DEBUG,
        file=media.original,
        outcome=decision.outcome.value,
        new_name=media.chosen_name,
    )
    return media.chosen_name


class AutoReviewer:
    """Accept every automatic proposal; skip files that have none."""

    def confirm(self, media: MediaFile, proposal: str) -> bool:
        return True

    def choose(self, media: MediaFile, options: list[str]) -> str:
        return SKIP_CHOICE

    def enter_title(self, media: MediaFile) -> str:
        return ""


class ConsoleReviewer:
    """Ask the review questions on the terminal with plain `input()` prompts."""

    def __init__(self, input_func=None, output_func=None):
        self._input = input_func or input
        self._output = output_func or print

    def confirm(self, media: MediaFile, proposal: str) -> bool:
        while True:
            answer = self._input(f"\n  {media.original}\n -> {proposal}\nAccept? (Y/n): ").strip().lower()
            if answer in ("", "y", "yes"):
                return True
            if answer in ("n", "no"):
                return False

    def choose(self, media: MediaFile, options: list[str]) -> str:
        self._output(f"\nChoose name for {media.original}:")
        for index, option in enumerate(options, start=1):
            self._output(f"  {index}) {option}")
        while True:
            answer = self._input(f"Choice [1-{len(options)}]: ").strip()
            if answer.isdigit() and 1 <= int(answer) <= len(options):
                return options[int(answer) - 1]
            self._output("Please enter one of the listed numbers.")

    def enter_title(self, media: MediaFile) -> str:
        return self._input("Name (without extension, blank to skip): ")
