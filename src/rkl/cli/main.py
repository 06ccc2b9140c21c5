#!/usr/bin/env python3
"""
RKL CLI
-------
Primary interface: one action subcommand plus a pod name fragment.

    rkl delete notebook
    rkl --middle=-sophon log kg2   # resolves 'kg-sophon2'
    RKL_CANDIDATE_SIZE=10 rkl describe sophon

Exit codes: 0 on success or when nothing matched, 1 on an invalid
selection, a failed command, an unreadable listing or a bad config file,
130 when interrupted.

Author: RKL Team
Date: 2026-10-19
"""

import sys
import logging
import argparse
from pathlib import Path
from typing import List, Optional

from rich.logging import RichHandler

from rkl.cli.formatter import PodFormatter, console
from rkl.cli.prompt import DisambiguationPrompt, InputProvider
from rkl.core.config import load_settings
from rkl.core.engine import RunOrchestrator
from rkl.core.errors import RklError
from rkl.core.models import Action, PodRequest
from rkl.kube.commands import CommandBuilder
from rkl.kube.executor import DryRunExecutor, ShellExecutor
from rkl.kube.lister import FilePodLister, KubectlPodLister

VERSION = "rkl v0.1.0"

logger = logging.getLogger("rkl.cli")

SUBCOMMAND_HELP = {
    Action.DELETE: "Delete the matching pod(s)",
    Action.DESCRIBE: "Describe the matching pod(s)",
    Action.IMAGE: "Show the image lines of `describe`",
    Action.CONTAINER: "Show the container lines of `describe`",
    Action.LOG: "Fetch logs of the matching pod(s)",
    Action.EXEC: "Open an interactive shell in the matching pod",
}


def setup_logging(verbose: bool = False):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


class RklCLI:
    """Translates command-line arguments into one orchestrated run."""

    def __init__(self, input_provider: Optional[InputProvider] = None):
        self.parser = argparse.ArgumentParser(
            prog="rkl",
            description="rkl - act on Kubernetes pods by partial or approximate name",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog="Set RKL_CANDIDATE_SIZE (1-25) to change how many candidates are offered."
        )
        self.formatter = PodFormatter()
        # None reads the menu answer from the terminal
        self.input_provider = input_provider
        self._setup_args()

    def _setup_args(self):
        self.parser.add_argument("-v", "--version", action="version", version=VERSION)
        self.parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
        self.parser.add_argument("--dry-run", action="store_true",
                                 help="Resolve and log commands without running them")
        self.parser.add_argument("--kubectl", help="Base kubectl command (overrides config file)")
        self.parser.add_argument("--config", type=Path, help="Path to YAML config file")
        self.parser.add_argument("--from-file", type=Path, metavar="PATH",
                                 help="Read pods from a saved `kubectl get po -owide` listing")
        self.parser.add_argument("-m", "--middle", help="Middle name inserted before a trailing version number")

        subparsers = self.parser.add_subparsers(dest="command", metavar="Command")
        for action in Action:
            sub = subparsers.add_parser(action.value, help=SUBCOMMAND_HELP[action])
            sub.add_argument("name", help="Full, partial or approximate pod name")
            # SUPPRESS keeps a top-level -m from being reset by the subparser
            sub.add_argument("-m", "--middle", default=argparse.SUPPRESS,
                             help="Middle name inserted before a trailing version number")

    def build_orchestrator(self, args: argparse.Namespace) -> RunOrchestrator:
        settings = load_settings(config_path=args.config, middle=args.middle, kubectl=args.kubectl)
        builder = CommandBuilder(settings.kubectl, settings.exec_shell)

        # Listing is read-only, so it stays live even in dry-run mode
        if args.from_file:
            lister = FilePodLister(args.from_file)
        else:
            lister = KubectlPodLister(ShellExecutor(), builder)

        executor = DryRunExecutor() if args.dry_run else ShellExecutor()
        return RunOrchestrator(
            lister=lister,
            executor=executor,
            builder=builder,
            prompt=DisambiguationPrompt(self.input_provider, self.formatter),
            config=settings.resolution,
        )

    def run(self, argv: Optional[List[str]] = None) -> int:
        """Primary routing entry point; returns the process exit code."""
        args = self.parser.parse_args(argv)
        if not args.command:
            self.formatter.print_header("Fuzzy Pod Targeting")
            self.parser.print_help()
            return 0

        setup_logging(args.verbose)
        request = PodRequest(action=Action(args.command), fragment=args.name)

        try:
            orchestrator = self.build_orchestrator(args)
            report = orchestrator.run(request)
        except RklError as e:
            logger.debug(f"{type(e).__name__} while handling '{args.name}'", exc_info=True)
            self.formatter.print_error(str(e))
            return 1
        except OSError as e:
            self.formatter.print_error(str(e))
            return 1

        self.formatter.print_output(report.outputs)
        if not report.success:
            self.formatter.print_error(
                f"{len(report.failures)} of {len(report.commands)} commands failed"
            )
            return 1
        return 0


def main():
    """Application entry point with interrupt handling."""
    try:
        sys.exit(RklCLI().run())
    except KeyboardInterrupt:
        console.print("\n[bold red]Terminated by user.[/bold red]")
        sys.exit(130)


if __name__ == "__main__":
    main()
