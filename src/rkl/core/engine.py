#!/usr/bin/env python3
"""
RKL ENGINE - Run Orchestration
------------------------------
Drives one invocation from fragment to executed commands:

    Normalize -> Resolve -> {Zero, One, Many}

Zero ends the run cleanly, One builds and runs a single command, Many asks
the operator and then runs one command per chosen pod, strictly in order.
Only an exact match may run without asking: a fuzzy result goes through
the menu even when it holds a single pod. Batch runs are best effort: a
failing item is recorded and the rest still run. The listing is taken once
per run and never reused.

Author: RKL Team
Date: 2026-10-19
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Protocol, Sequence

from rkl.core.errors import ExecutionFailure
from rkl.core.models import PodRecord, PodRequest, ResolutionConfig
from rkl.kube.commands import CommandBuilder
from rkl.kube.executor import CommandExecutor
from rkl.resolving.normalizer import fill_middle_name
from rkl.resolving.resolver import CandidateResolver

logger = logging.getLogger("rkl.engine")

NO_MATCH = "NO_MATCH"
SINGLE = "SINGLE"
MULTIPLE = "MULTIPLE"


class PodLister(Protocol):
    def list_pods(self) -> List[PodRecord]:
        ...


class CandidatePrompt(Protocol):
    def choose(self, candidates: Sequence[PodRecord], window_size: int,
               allow_single: bool = False) -> List[str]:
        ...


@dataclass
class RunReport:
    """What happened during one run; the CLI derives its exit code from it."""
    fragment: str                                              # As typed by the operator
    resolved_fragment: str                                     # After middle-name insertion
    outcome: str = NO_MATCH
    fuzzy: bool = False                                        # Candidates came from similarity ranking
    candidates: List[PodRecord] = field(default_factory=list)
    commands: List[str] = field(default_factory=list)          # In execution order
    outputs: List[str] = field(default_factory=list)
    failures: List[ExecutionFailure] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return not self.failures


class RunOrchestrator:

    def __init__(self, lister: PodLister, executor: CommandExecutor,
                 builder: CommandBuilder, prompt: CandidatePrompt,
                 config: Optional[ResolutionConfig] = None):
        self.lister = lister
        self.executor = executor
        self.builder = builder
        self.prompt = prompt
        self.config = config or ResolutionConfig()
        self.resolver = CandidateResolver(self.config.candidate_window_size)

    def run(self, request: PodRequest) -> RunReport:
        # --- Normalize ---
        fragment = fill_middle_name(request.fragment, self.config.middle_name)
        if fragment != request.fragment:
            logger.debug(f"Fragment '{request.fragment}' normalized to '{fragment}'")
        report = RunReport(fragment=request.fragment, resolved_fragment=fragment)

        # --- Resolve ---
        pods = self.lister.list_pods()
        resolution = self.resolver.match(fragment, pods)
        report.candidates = resolution.candidates
        report.fuzzy = resolution.fuzzy

        # --- Dispatch ---
        if not resolution.candidates:
            logger.info(f"No pod matches '{fragment}', nothing to do.")
            return report

        if len(resolution.candidates) == 1 and not resolution.fuzzy:
            report.outcome = SINGLE
            self._execute(request, [resolution.candidates[0].name], report)
            return report

        report.outcome = MULTIPLE
        if resolution.fuzzy:
            logger.info(f"Pods with names similar to '{fragment}', possible choices:")
        else:
            logger.info(f"Multiple pods named like '{fragment}' found, possible choices:")
        chosen = self.prompt.choose(
            resolution.candidates, self.config.candidate_window_size,
            allow_single=resolution.fuzzy,
        )
        self._execute(request, chosen, report)
        return report

    def _execute(self, request: PodRequest, pod_names: List[str], report: RunReport):
        """Runs one command per pod, sequentially. Only batches tolerate failures."""
        batch = len(pod_names) > 1
        for pod_name in pod_names:
            command = self.builder.build(request.action, pod_name)
            report.commands.append(command)
            logger.info(command)
            try:
                output = self.executor.run(command, interactive=request.action.interactive)
            except ExecutionFailure as e:
                if not batch:
                    raise
                logger.error(f"{pod_name}: {e}")
                report.failures.append(e)
                continue
            report.outputs.append(output)
