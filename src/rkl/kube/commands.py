#!/usr/bin/env python3
"""
RKL COMMAND BUILDER
-------------------
Maps an Action and a resolved pod name to the literal shell command that
performs it. The kubectl base command (binary plus any server, certificate
or namespace flags) is supplied at construction.

Author: RKL Team
Date: 2026-10-19
"""

from rkl.core.models import Action

# Templates receive {kubectl}, {pod} and {shell}
COMMAND_TEMPLATES = {
    Action.DELETE: "{kubectl} delete po {pod}",
    Action.DESCRIBE: "{kubectl} describe po {pod}",
    Action.LOG: "{kubectl} logs {pod}",
    Action.IMAGE: "{kubectl} describe po {pod} | grep Image",
    Action.CONTAINER: "{kubectl} describe po {pod} | grep container",
    Action.EXEC: "{kubectl} exec -it {pod} -- {shell}",
}


class CommandBuilder:
    """Pure string templating; building a command never touches the cluster."""

    def __init__(self, kubectl: str = "kubectl", exec_shell: str = "sh"):
        self.kubectl = kubectl.strip()
        self.exec_shell = exec_shell

    def build(self, action: Action, pod_name: str) -> str:
        if not pod_name:
            raise ValueError("Cannot build a command for an empty pod name")
        return COMMAND_TEMPLATES[action].format(
            kubectl=self.kubectl, pod=pod_name, shell=self.exec_shell
        )

    def list_pods_command(self) -> str:
        return f"{self.kubectl} get po -owide --no-headers"
