import pytest

from rkl.core.errors import ExecutionFailure
from rkl.core.models import Action
from rkl.kube.commands import CommandBuilder
from rkl.kube.executor import DryRunExecutor, ShellExecutor

POD = "sophon-kg-sophon2-bf9769d97-4hqgv"


@pytest.mark.parametrize("action, expected", [
    (Action.DELETE, f"kubectl delete po {POD}"),
    (Action.DESCRIBE, f"kubectl describe po {POD}"),
    (Action.LOG, f"kubectl logs {POD}"),
    (Action.IMAGE, f"kubectl describe po {POD} | grep Image"),
    (Action.CONTAINER, f"kubectl describe po {POD} | grep container"),
    (Action.EXEC, f"kubectl exec -it {POD} -- sh"),
])
def test_command_templates(action, expected):
    """Each action maps to its kubectl invocation."""
    assert CommandBuilder().build(action, POD) == expected


def test_base_command_and_shell_are_configurable():
    builder = CommandBuilder("kubectl --context prod ", exec_shell="bash")
    assert builder.build(Action.DELETE, "p") == "kubectl --context prod delete po p"
    assert builder.build(Action.EXEC, "p") == "kubectl --context prod exec -it p -- bash"


def test_empty_pod_name_is_refused():
    with pytest.raises(ValueError):
        CommandBuilder().build(Action.DELETE, "")


def test_only_exec_is_interactive():
    assert [a for a in Action if a.interactive] == [Action.EXEC]


def test_shell_executor_captures_stdout():
    assert ShellExecutor().run("echo hello | tr a-z A-Z") == "HELLO\n"


def test_shell_executor_surfaces_failures():
    """Non-zero exits carry the return code and stderr."""
    with pytest.raises(ExecutionFailure) as excinfo:
        ShellExecutor().run("echo nope >&2; exit 3")
    assert excinfo.value.returncode == 3
    assert "nope" in excinfo.value.stderr


def test_dry_run_executes_nothing(tmp_path):
    """Dry runs only log; the command has no effect."""
    marker = tmp_path / "touched"
    assert DryRunExecutor().run(f"touch {marker}") == ""
    assert not marker.exists()
