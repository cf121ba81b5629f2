# Copyright 2025 ospf-linkdisc contributors
# SPDX-License-Identifier: Apache-2.0
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# This file was created or modified with the assistance of an AI (Large Language Model).
# Review required for correctness, security, and licensing.
"""Tests for the in-memory topology registry."""

import json
from pathlib import Path

import pytest

from ospf_linkdisc.models import Port
from ospf_linkdisc.port_discovery import parse_interface_ports
from ospf_linkdisc.port_resolve import resolve_remote_port
from ospf_linkdisc.registry import InMemoryRegistry, load_registry


def test_in_memory_registry_lookup() -> None:
    registry = InMemoryRegistry()
    registry.add_device("netconf:10.0.0.1:22", [Port(1, {"ip": "10.0.0.1/24"})])

    assert registry.find_device("netconf:10.0.0.1:22") == "netconf:10.0.0.1:22"
    assert registry.find_device("netconf:10.0.0.1:830") is None
    assert [port.number for port in registry.list_ports("netconf:10.0.0.1:22")] == [1]
    assert registry.list_ports("netconf:10.0.0.2:22") == ()


def test_registry_from_discovered_ports() -> None:
    registry = InMemoryRegistry()
    registry.add_device(
        "netconf:192.168.0.4:22",
        parse_interface_ports(
            "GigabitEthernet1 is up, line protocol is up\n"
            "  Internet address is 192.168.0.4/24\n"
            "GigabitEthernet3 is up, line protocol is up\n"
            "  Internet address is 10.100.4.4/24\n"
        ),
    )

    assert resolve_remote_port("netconf:192.168.0.4:22", "10.100.4.4", registry) == 2


def test_load_registry(tmp_path: Path) -> None:
    path = tmp_path / "registry.json"
    path.write_text(
        json.dumps(
            {
                "devices": [
                    {
                        "id": "netconf:192.168.0.4:22",
                        "ports": [{"number": 3, "annotations": {"ip": "10.100.4.4/24"}}],
                    },
                    {"id": "netconf:192.168.0.5:830", "ports": []},
                ]
            }
        ),
        encoding="utf-8",
    )

    registry = load_registry(path)

    ports = registry.list_ports("netconf:192.168.0.4:22")
    assert ports[0].number == 3
    assert ports[0].annotations["ip"] == "10.100.4.4/24"
    assert registry.find_device("netconf:192.168.0.5:830") == "netconf:192.168.0.5:830"


def test_load_registry_requires_devices(tmp_path: Path) -> None:
    path = tmp_path / "registry.json"
    path.write_text('{"hosts": []}', encoding="utf-8")

    with pytest.raises(ValueError, match="missing a devices list"):
        load_registry(path)


def test_load_registry_requires_fields(tmp_path: Path) -> None:
    path = tmp_path / "registry.json"
    path.write_text('{"devices": [{"ports": []}]}', encoding="utf-8")

    with pytest.raises(ValueError, match="empty required fields: id"):
        load_registry(path)


def test_load_registry_invalid_port_number(tmp_path: Path) -> None:
    path = tmp_path / "registry.json"
    path.write_text(
        '{"devices": [{"id": "netconf:10.0.0.1:22", "ports": [{"number": "eth0"}]}]}',
        encoding="utf-8",
    )

    with pytest.raises(ValueError, match="invalid port number"):
        load_registry(path)
