"""Тесты операций containers/images/volumes поверх поддельного CLI."""

from __future__ import annotations

import json

import pytest

from dockdesk.runtime import containers, images, volumes
from dockdesk.runtime.exceptions import (
    CommandFailedError,
    DecodeError,
    NotFoundError,
    UnknownActionError,
)


def test_list_containers_invocation_and_decoding(make_client) -> None:
    output = "\n".join(
        [
            '{"ID": "a1", "Names": "web", "State": "running", "Ports": "0.0.0.0:80->80/tcp"}',
            "this line is broken",
            '{"ID": "b2", "Names": "db", "State": "exited"}',
        ]
    )
    client, runner = make_client(stdout=output + "\n")

    result = containers.list_containers(client)

    assert runner.commands == [["docker", "ps", "-a", "--format", "{{json .}}"]]
    assert [item.id for item in result] == ["a1", "b2"]
    assert result[0].ports[0].public_port == 80


def test_list_containers_empty_output(make_client) -> None:
    client, _ = make_client(stdout="")
    assert containers.list_containers(client) == []


def test_list_containers_failure_raises(make_client) -> None:
    client, _ = make_client(stderr="Cannot connect to the Docker daemon", returncode=1)
    with pytest.raises(CommandFailedError, match="Cannot connect"):
        containers.list_containers(client)


@pytest.mark.parametrize(
    ("action", "expected"),
    [
        ("start", ["docker", "start", "abc"]),
        ("stop", ["docker", "stop", "abc"]),
        ("restart", ["docker", "restart", "abc"]),
        ("remove", ["docker", "rm", "-f", "abc"]),
        ("pause", ["docker", "pause", "abc"]),
        ("unpause", ["docker", "unpause", "abc"]),
    ],
)
def test_container_action_maps_to_subcommand(make_client, action: str, expected: list) -> None:
    client, runner = make_client(stdout="abc\n")
    assert containers.container_action(client, "abc", action) == "abc\n"
    assert runner.commands == [expected]


def test_container_action_unknown_fails_before_spawn(make_client) -> None:
    client, runner = make_client()
    with pytest.raises(UnknownActionError, match="Unknown action: explode") as excinfo:
        containers.container_action(client, "abc", "explode")
    assert excinfo.value.action == "explode"
    assert runner.calls == []


def test_fetch_logs_passes_tail(make_client) -> None:
    client, runner = make_client(stdout="line 1\nline 2\n")
    assert containers.fetch_logs(client, "abc", tail=100) == "line 1\nline 2\n"
    assert runner.commands == [["docker", "logs", "--tail", "100", "abc"]]


def test_fetch_logs_rejects_negative_tail(make_client) -> None:
    client, runner = make_client()
    with pytest.raises(ValueError):
        containers.fetch_logs(client, "abc", tail=-1)
    assert runner.calls == []


def test_inspect_returns_first_element(make_client) -> None:
    first = {"Id": "abc", "Name": "/web", "State": {"Status": "running", "Pid": 42}}
    second = {"Id": "def"}
    client, runner = make_client(stdout=json.dumps([first, second], indent=4))

    result = containers.inspect_container(client, "abc")

    assert runner.commands == [["docker", "inspect", "abc"]]
    assert json.loads(result) == first
    assert list(json.loads(result)) == ["Id", "Name", "State"]


def test_inspect_empty_array_is_not_found(make_client) -> None:
    client, _ = make_client(stdout="[]\n")
    with pytest.raises(NotFoundError, match="No container found"):
        containers.inspect_container(client, "abc")


@pytest.mark.parametrize("output", ["not json", '{"Id": "abc"}', "[" * 200000])
def test_inspect_unexpected_output_is_decode_error(make_client, output: str) -> None:
    client, _ = make_client(stdout=output)
    with pytest.raises(DecodeError, match="Failed to parse inspect output"):
        containers.inspect_container(client, "abc")


def test_fetch_stats_decodes_single_line(make_client) -> None:
    line = json.dumps(
        {
            "CPUPerc": "12.5%",
            "MemPerc": "20.00%",
            "MemUsage": "100MiB / 500MiB",
            "NetIO": "1kB / 2kB",
            "BlockIO": "0B / 0B",
        }
    )
    client, runner = make_client(stdout=line + "\n")

    stats = containers.fetch_stats(client, "abc")

    assert runner.commands == [
        ["docker", "stats", "--no-stream", "--format", "{{json .}}", "abc"]
    ]
    assert stats.cpu_percent == 12.5
    assert stats.memory_usage == 104857600
    assert stats.memory_limit == 524288000
    assert stats.network_rx == 1024
    assert stats.network_tx == 2048


def test_fetch_stats_without_output_is_not_found(make_client) -> None:
    client, _ = make_client(stdout="\n")
    with pytest.raises(NotFoundError, match="No stats available"):
        containers.fetch_stats(client, "abc")


def test_list_images(make_client) -> None:
    output = "\n".join(
        [
            '{"ID": "a1b2", "Repository": "nginx", "Tag": "latest", "Size": "187MB"}',
            '{"ID": "c3d4", "Repository": "<none>", "Tag": "<none>", "Size": "1.2GB"}',
        ]
    )
    client, runner = make_client(stdout=output)

    result = images.list_images(client)

    assert runner.commands == [["docker", "images", "--format", "{{json .}}"]]
    assert [item.id for item in result] == ["sha256:a1b2", "sha256:c3d4"]
    assert result[0].repo_tags == ["nginx:latest"]
    assert result[1].repo_tags == []


def test_remove_and_pull_image(make_client) -> None:
    client, runner = make_client(stdout="ok\n")
    assert images.remove_image(client, "sha256:a1b2") == "ok\n"
    assert images.pull_image(client, "redis:7") == "ok\n"
    assert runner.commands == [["docker", "rmi", "sha256:a1b2"], ["docker", "pull", "redis:7"]]


def test_volumes_operations(make_client) -> None:
    client, runner = make_client(
        stdout='{"Name": "data", "Driver": "local", "Mountpoint": "/m", "Scope": "local"}\n'
    )
    result = volumes.list_volumes(client)
    volumes.create_volume(client, "cache")
    volumes.remove_volume(client, "cache")

    assert result[0].name == "data"
    assert runner.commands == [
        ["docker", "volume", "ls", "--format", "{{json .}}"],
        ["docker", "volume", "create", "cache"],
        ["docker", "volume", "rm", "cache"],
    ]
