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
"""Discovery settings and JSON loading."""

from __future__ import annotations

import json
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

from ospf_linkdisc.identity import CandidateBuilder, uri_candidate

POLICY_KEEP = "keep"
POLICY_DROP = "drop"
_POLICIES = (POLICY_KEEP, POLICY_DROP)


@dataclass(frozen=True)
class DiscoverySettings:
    """Tunables for parsing and resolving OSPF neighbor tables."""

    full_state_marker: str = "FULL"
    local_interface_prefixes: tuple[str, ...] = ("GigabitEthernet",)
    candidate_scheme: str = "netconf"
    candidate_ports: tuple[int, ...] = (22, 830)
    unresolved_port_policy: str = POLICY_KEEP

    def candidates(self) -> list[CandidateBuilder]:
        """Return candidate identity builders in probing order."""

        return [uri_candidate(self.candidate_scheme, port) for port in self.candidate_ports]


def load_settings(path: str | Path) -> DiscoverySettings:
    """Load discovery settings from a JSON file."""

    with Path(path).open(encoding="utf-8") as handle:
        try:
            raw = json.load(handle)
        except json.JSONDecodeError as exc:
            raise ValueError(f"{path} is not valid JSON: {exc}") from exc
    if not isinstance(raw, dict):
        raise ValueError(f"{path} must contain a JSON object")

    known = {item.name for item in fields(DiscoverySettings)}
    unknown = sorted(set(raw) - known)
    if unknown:
        raise ValueError(f"{path} has unknown settings: {', '.join(unknown)}")

    values: dict[str, Any] = dict(raw)
    for name in ("local_interface_prefixes", "candidate_ports"):
        if name in values:
            if not isinstance(values[name], list) or not values[name]:
                raise ValueError(f"{path} setting {name} must be a non-empty list")
            values[name] = tuple(values[name])

    settings = DiscoverySettings(**values)
    _validate_settings(path, settings)
    return settings


def _validate_settings(path: str | Path, settings: DiscoverySettings) -> None:
    """Ensure setting values are usable."""

    if not isinstance(settings.full_state_marker, str) or not settings.full_state_marker:
        raise ValueError(f"{path} setting full_state_marker must not be empty")
    if not isinstance(settings.candidate_scheme, str) or not settings.candidate_scheme:
        raise ValueError(f"{path} setting candidate_scheme must be a non-empty string")
    bad_prefixes = [
        prefix
        for prefix in settings.local_interface_prefixes
        if not isinstance(prefix, str) or not prefix.strip()
    ]
    if bad_prefixes:
        raise ValueError(f"{path} has invalid local_interface_prefixes: {bad_prefixes}")
    if settings.unresolved_port_policy not in _POLICIES:
        raise ValueError(
            f"{path} setting unresolved_port_policy must be one of: {', '.join(_POLICIES)}"
        )
    bad_ports = [
        port
        for port in settings.candidate_ports
        if isinstance(port, bool) or not isinstance(port, int) or not 0 < port < 65536
    ]
    if bad_ports:
        raise ValueError(f"{path} has invalid candidate_ports: {bad_ports}")
