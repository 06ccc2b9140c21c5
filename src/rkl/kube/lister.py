#!/usr/bin/env python3
"""
RKL POD LISTER
--------------
Fetches a fresh snapshot of pods, either live from kubectl or from a saved
`kubectl get po -owide` listing, and parses it into PodRecords.

Author: RKL Team
Date: 2026-10-19
"""

import logging
from pathlib import Path
from typing import List

from rkl.core.errors import ListingParseError
from rkl.core.models import PodRecord
from rkl.kube.commands import CommandBuilder
from rkl.kube.executor import CommandExecutor

logger = logging.getLogger("rkl.lister")

POD_COLUMNS = 9
RESTARTS_COLUMN = 3


def _fold_restart_annotation(fields: List[str]) -> List[str]:
    """
    Newer kubectl prints restarts as '4 (2d ago)', which splits into three
    tokens. Re-join the parenthesised part so the columns line up again.
    """
    start = RESTARTS_COLUMN + 1
    if len(fields) <= POD_COLUMNS or not fields[start].startswith("("):
        return fields
    for end in range(start, len(fields)):
        if fields[end].endswith(")"):
            restarts = " ".join(fields[RESTARTS_COLUMN:end + 1])
            return fields[:RESTARTS_COLUMN] + [restarts] + fields[end + 1:]
    return fields


def parse_pod_line(line: str, line_no: int = 1) -> PodRecord:
    fields = _fold_restart_annotation(line.split())
    if len(fields) != POD_COLUMNS:
        raise ListingParseError(line_no, line, len(fields))
    return PodRecord(*fields)


def parse_pod_listing(text: str) -> List[PodRecord]:
    """
    Parses `get po -owide` output. Blank lines and a leading NAME header are
    skipped; any other malformed line aborts the whole listing.
    """
    pods = []
    for line_no, line in enumerate(text.splitlines(), start=1):
        if not line.strip():
            continue
        if not pods and line.split()[0] == "NAME":
            continue
        pods.append(parse_pod_line(line, line_no))
    return pods


class KubectlPodLister:
    """Live listing via `kubectl get po -owide --no-headers`."""

    def __init__(self, executor: CommandExecutor, builder: CommandBuilder):
        self.executor = executor
        self.builder = builder

    def list_pods(self) -> List[PodRecord]:
        output = self.executor.run(self.builder.list_pods_command())
        pods = parse_pod_listing(output)
        logger.debug(f"kubectl listed {len(pods)} pod(s)")
        return pods


class FilePodLister:
    """Reads a listing saved with `kubectl get po -owide > pods.txt`."""

    def __init__(self, path: Path):
        self.path = Path(path)

    def list_pods(self) -> List[PodRecord]:
        pods = parse_pod_listing(self.path.read_text(encoding="utf-8"))
        logger.debug(f"Loaded {len(pods)} pod(s) from {self.path}")
        return pods
