#!/usr/bin/env python3
"""
RKL DISAMBIGUATION PROMPT
-------------------------
When several pods match, the operator picks one by letter, or 'z' to apply
the action to every displayed candidate. One answer is read; anything that
is not a single valid letter is rejected outright, with no second chance.

Author: RKL Team
Date: 2026-10-19
"""

import logging
import string
from typing import Callable, List, Optional, Sequence

from rkl.cli.formatter import PodFormatter
from rkl.core.errors import InvalidSelection
from rkl.core.models import MAX_CANDIDATE_SIZE, PodRecord

logger = logging.getLogger("rkl.prompt")

APPLY_TO_ALL = "z"

# Reads one line of operator input; Console.input fits, and so does a lambda in tests
InputProvider = Callable[[str], str]


def candidate_labels(size: int) -> str:
    """The first min(25, size) lowercase letters; 'z' is never a label."""
    return string.ascii_lowercase[:max(0, min(MAX_CANDIDATE_SIZE, size))]


class DisambiguationPrompt:

    def __init__(self, input_provider: Optional[InputProvider] = None,
                 formatter: Optional[PodFormatter] = None):
        self.formatter = formatter or PodFormatter()
        self.input_provider = input_provider or self.formatter.console.input

    def choose(self, candidates: Sequence[PodRecord], window_size: int,
               allow_single: bool = False) -> List[str]:
        """
        Shows the lettered menu and returns the chosen pod names, in label
        order when 'z' is picked.

        A lone candidate is only offered when `allow_single` is set, which the
        engine does for fuzzy matches so a merely similar pod is confirmed first.
        """
        minimum = 1 if allow_single else 2
        if len(candidates) < minimum:
            raise ValueError(f"Disambiguation needs at least {minimum} candidate(s)")

        labels = candidate_labels(min(window_size, len(candidates)))
        displayed = list(candidates[:len(labels)])

        logger.info(
            f"You are getting candidate size of {len(labels)}, "
            f"try to alter env RKL_CANDIDATE_SIZE to view more"
        )
        self.formatter.show_candidates(zip(labels, displayed))

        try:
            raw = self.input_provider("type your choice... ")
        except EOFError:
            raise InvalidSelection("", labels + APPLY_TO_ALL)
        choice = raw.strip().lower()

        if len(choice) != 1 or (choice not in labels and choice != APPLY_TO_ALL):
            raise InvalidSelection(choice, labels + APPLY_TO_ALL)

        if choice == APPLY_TO_ALL:
            return [pod.name for pod in displayed]
        return [displayed[labels.index(choice)].name]
