#!/usr/bin/env python3
"""
RKL CORE MODELS
---------------
Defines the fundamental data structures shared across the RKL resolver.
A listing is parsed into PodRecords once per run and never cached.

Author: RKL Team
Date: 2026-10-19
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

DEFAULT_CANDIDATE_SIZE = 5
MAX_CANDIDATE_SIZE = 25


@dataclass(frozen=True)
class PodRecord:
    """
    One line of `kubectl get po -owide`.

    Only `name` takes part in matching; every other field is an opaque
    display string carried through for the disambiguation menu.
    """
    name: str               # Unique key within a listing
    ready: str              # e.g. '1/1'
    status: str             # Pod phase as printed by kubectl
    restarts: str           # Restart count, possibly with '(2d ago)' annotation
    age: str
    ip: str
    node: str
    nominated_node: str
    readiness_gates: str

    def __str__(self) -> str:
        return "\t".join([
            self.name, self.ready, self.status, self.restarts, self.age,
            self.ip, self.node, self.nominated_node, self.readiness_gates,
        ])


class Action(Enum):
    """The closed set of operations RKL can issue against a resolved pod."""
    DELETE = "delete"
    DESCRIBE = "describe"
    IMAGE = "image"
    CONTAINER = "container"
    LOG = "log"
    EXEC = "exec"

    @property
    def interactive(self) -> bool:
        """Exec sessions need the operator's terminal, not captured output."""
        return self is Action.EXEC


@dataclass(frozen=True)
class PodRequest:
    """What the operator asked for: one action and the fragment they typed."""
    action: Action
    fragment: str


@dataclass(frozen=True)
class ResolutionConfig:
    candidate_window_size: int = DEFAULT_CANDIDATE_SIZE
    middle_name: Optional[str] = None   # Infix inserted before a trailing version number
