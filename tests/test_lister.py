import pytest

from conftest import FakeExecutor
from rkl.core.errors import ListingParseError
from rkl.kube.commands import CommandBuilder
from rkl.kube.lister import KubectlPodLister, parse_pod_line, parse_pod_listing


def test_fixture_listing_parses_all_fifteen(sophon_pods):
    """The saved listing, header included, yields every pod."""
    assert len(sophon_pods) == 15
    assert all(p.name.startswith("sophon-") for p in sophon_pods)
    notebook = sophon_pods[7]
    assert notebook.name == "sophon-notebook-sophon2-57f5c77786-8lpkw"
    assert notebook.age == "20h"
    assert notebook.readiness_gates == "<none>"


def test_record_renders_tab_separated(sophon_pods):
    assert str(sophon_pods[0]).split("\t")[0] == "sophon-apimanager-sophon2-58f4b7965-n99hz"
    assert len(str(sophon_pods[0]).split("\t")) == 9


def test_restart_annotation_is_folded_back():
    """Newer kubectl prints '4 (2d ago)' in the restarts column."""
    record = parse_pod_line("web-7d9 1/1 Running 4 (2d ago) 12d 10.0.0.7 node1 <none> <none>")
    assert record.restarts == "4 (2d ago)"
    assert record.age == "12d"
    assert record.readiness_gates == "<none>"


def test_blank_lines_and_empty_output():
    assert parse_pod_listing("") == []
    assert len(parse_pod_listing("\n  a 1/1 Running 0 1d ip n <none> <none>\n\n")) == 1


@pytest.mark.parametrize("line", [
    "too few fields here",
    "a 1/1 Running 0 1d ip node <none> <none> extra",
])
def test_malformed_line_is_fatal(line):
    """A bad column count aborts the listing and names the line."""
    listing = "ok-pod 1/1 Running 0 1d ip node <none> <none>\n" + line
    with pytest.raises(ListingParseError) as excinfo:
        parse_pod_listing(listing)
    assert excinfo.value.line_no == 2


def test_kubectl_lister_uses_configured_base_command():
    builder = CommandBuilder("kubectl -s https://127.0.0.1:6443")
    command = builder.list_pods_command()
    executor = FakeExecutor(outputs={command: "p1 1/1 Running 0 1d ip n <none> <none>\n"})

    pods = KubectlPodLister(executor, builder).list_pods()

    assert executor.commands == ["kubectl -s https://127.0.0.1:6443 get po -owide --no-headers"]
    assert [p.name for p in pods] == ["p1"]
