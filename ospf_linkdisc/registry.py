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
"""Topology registry interface and an in-memory implementation."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Iterable, Protocol, Sequence

from ospf_linkdisc.models import DeviceId, Port

_DEVICE_REQUIRED_FIELDS = ("id", "ports")
_PORT_REQUIRED_FIELDS = ("number",)


class TopologyRegistry(Protocol):
    """Read-only view of devices and ports already known to the controller."""

    def find_device(self, device_id: DeviceId) -> DeviceId | None:
        ...

    def list_ports(self, device_id: DeviceId) -> Sequence[Port]:
        ...


class InMemoryRegistry:
    """Registry backed by a dict of device ID to ordered ports."""

    def __init__(self) -> None:
        self._ports: dict[DeviceId, list[Port]] = {}

    def add_device(self, device_id: DeviceId, ports: Iterable[Port] = ()) -> None:
        """Register a device, replacing any ports recorded for it."""

        self._ports[device_id] = list(ports)

    def find_device(self, device_id: DeviceId) -> DeviceId | None:
        return device_id if device_id in self._ports else None

    def list_ports(self, device_id: DeviceId) -> Sequence[Port]:
        return tuple(self._ports.get(device_id, ()))


def load_registry(path: str | Path) -> InMemoryRegistry:
    """Load a registry snapshot from JSON.

    Expected layout::

        {"devices": [{"id": "netconf:192.168.0.4:22",
                      "ports": [{"number": 3, "annotations": {"ip": "10.100.4.4/24"}}]}]}
    """

    with Path(path).open(encoding="utf-8") as handle:
        try:
            raw = json.load(handle)
        except json.JSONDecodeError as exc:
            raise ValueError(f"{path} is not valid JSON: {exc}") from exc
    devices = raw.get("devices") if isinstance(raw, dict) else None
    if not isinstance(devices, list):
        raise ValueError(f"{path} is missing a devices list")

    registry = InMemoryRegistry()
    for entry in devices:
        _validate_entry(path, entry, _DEVICE_REQUIRED_FIELDS)
        if not isinstance(entry["ports"], list):
            raise ValueError(f"{path} device {entry['id']} ports must be a list")
        ports = []
        for port in entry["ports"]:
            _validate_entry(path, port, _PORT_REQUIRED_FIELDS)
            try:
                number = int(port["number"])
            except (TypeError, ValueError) as exc:
                raise ValueError(f"{path} has invalid port number: {port['number']!r}") from exc
            annotations = {
                str(key): str(value) for key, value in (port.get("annotations") or {}).items()
            }
            ports.append(Port(number=number, annotations=annotations))
        registry.add_device(str(entry["id"]), ports)
    return registry


def _validate_entry(path: str | Path, entry: object, required: tuple[str, ...]) -> None:
    """Ensure required fields are present on a JSON object."""

    if not isinstance(entry, dict):
        raise ValueError(f"{path} has a non-object entry: {entry!r}")
    missing = [name for name in required if entry.get(name) in (None, "")]
    if missing:
        raise ValueError(f"{path} has empty required fields: {', '.join(missing)}")
