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
"""Tests for remote port resolution."""

import logging

import pytest

from ospf_linkdisc.models import UNRESOLVED_PORT, Port
from ospf_linkdisc.port_resolve import resolve_remote_port
from ospf_linkdisc.registry import InMemoryRegistry

DEVICE = "netconf:192.168.0.4:22"


def _registry() -> InMemoryRegistry:
    registry = InMemoryRegistry()
    registry.add_device(
        DEVICE,
        [
            Port(1, {"name": "GigabitEthernet1", "ip": "192.168.0.4/24"}),
            Port(2, {"name": "GigabitEthernet2"}),
            Port(3, {"name": "GigabitEthernet3", "ip": "10.100.4.4/24"}),
        ],
    )
    return registry


def test_resolve_remote_port_matches_prefixed_annotation() -> None:
    assert resolve_remote_port(DEVICE, "10.100.4.4", _registry()) == 3


def test_resolve_remote_port_returns_first_match() -> None:
    registry = InMemoryRegistry()
    registry.add_device(
        DEVICE,
        [Port(7, {"ip": "10.1.1.1/30"}), Port(8, {"ip": "10.1.1.1/30"})],
    )

    assert resolve_remote_port(DEVICE, "10.1.1.1", registry) == 7


def test_resolve_remote_port_unresolved_warns(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING):
        port = resolve_remote_port(DEVICE, "10.9.9.9", _registry(), router_id="192.168.0.4")

    assert port == UNRESOLVED_PORT
    message = caplog.records[-1].getMessage()
    assert "10.9.9.9" in message
    assert "192.168.0.4" in message


def test_resolve_remote_port_device_without_ports() -> None:
    registry = InMemoryRegistry()
    registry.add_device(DEVICE)

    assert resolve_remote_port(DEVICE, "10.100.4.4", registry) == UNRESOLVED_PORT
