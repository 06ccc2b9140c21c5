#!/usr/bin/env python3
"""
RKL EXECUTORS
-------------
Everything that actually runs a built command lives behind a single
method, run(command, interactive=False) -> str, so the resolver and the
orchestrator can be exercised against a fake.

Author: RKL Team
Date: 2026-10-19
"""

import logging
import subprocess
from typing import Protocol

from rkl.core.errors import ExecutionFailure

logger = logging.getLogger("rkl.executor")


class CommandExecutor(Protocol):
    def run(self, command: str, interactive: bool = False) -> str:
        ...


class ShellExecutor:
    """
    Runs commands through the shell so templates may contain pipes
    (e.g. `describe po x | grep Image`).
    """

    def run(self, command: str, interactive: bool = False) -> str:
        logger.debug(f"Executing: {command}")
        try:
            if interactive:
                # Exec sessions inherit the operator's terminal
                result = subprocess.run(command, shell=True)
                stdout, stderr = "", ""
            else:
                result = subprocess.run(command, shell=True, capture_output=True, text=True)
                stdout, stderr = result.stdout, result.stderr
        except OSError as e:
            raise ExecutionFailure(command, stderr=str(e))

        if result.returncode != 0:
            raise ExecutionFailure(command, returncode=result.returncode, stderr=stderr)
        return stdout


class DryRunExecutor:
    """Logs each command instead of running it."""

    def run(self, command: str, interactive: bool = False) -> str:
        logger.info(f"[dry-run] {command}")
        return ""
