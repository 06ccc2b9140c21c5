#!/usr/bin/env python3
"""
RKL CANDIDATE RESOLVER
----------------------
Turns a name fragment plus a pod listing into an ordered candidate set.

Resolution is two-phase:
1. Exact pass: every pod whose name contains the fragment, in listing order.
2. Fuzzy pass (only when the exact pass is empty): all pods ranked by
   Jaccard distance to the fragment, truncated to the candidate window.

Author: RKL Team
Date: 2026-10-19
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, List, Sequence

from rkl.core.models import DEFAULT_CANDIDATE_SIZE, MAX_CANDIDATE_SIZE, PodRecord
from rkl.resolving.scorer import jaccard_distance

logger = logging.getLogger("rkl.resolver")

Scorer = Callable[[str, str], float]


@dataclass
class Resolution:
    candidates: List[PodRecord] = field(default_factory=list)
    fuzzy: bool = False     # Only similar names, nothing contained the fragment


class CandidateResolver:
    """Produces the CandidateSet the orchestrator dispatches on."""

    def __init__(self, window_size: int = DEFAULT_CANDIDATE_SIZE,
                 scorer: Scorer = jaccard_distance):
        self.window_size = max(1, min(window_size, MAX_CANDIDATE_SIZE))
        self.scorer = scorer

    def exact_matches(self, fragment: str, pods: Sequence[PodRecord]) -> List[PodRecord]:
        return [pod for pod in pods if fragment in pod.name]

    def fuzzy_matches(self, fragment: str, pods: Sequence[PodRecord]) -> List[PodRecord]:
        """
        Closest pods first. sorted() is stable, so equal distances keep the
        order kubectl listed them in.
        """
        ranked = sorted(pods, key=lambda pod: self.scorer(pod.name, fragment))
        return ranked[:self.window_size]

    def match(self, fragment: str, pods: Sequence[PodRecord]) -> Resolution:
        """Runs both phases and records whether the fuzzy phase produced the result."""
        candidates = self.exact_matches(fragment, pods)
        if candidates:
            logger.debug(f"{len(candidates)} pod(s) contain '{fragment}'")
            return Resolution(candidates)

        logger.info(f"No pod named like '{fragment}' found, trying fuzzy match...")
        candidates = self.fuzzy_matches(fragment, pods)
        if not candidates:
            logger.info("Fuzzy match has no results.")
        return Resolution(candidates, fuzzy=True)

    def resolve(self, fragment: str, pods: Sequence[PodRecord]) -> List[PodRecord]:
        return self.match(fragment, pods).candidates
