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
"""Parsing of ``show ip ospf neighbor`` text output.

Example lines::

    192.168.0.3       1   DOWN            00:00:00    10.100.2.3      GigabitEthernet3
    192.168.0.4       1   FULL/DR         00:00:31    10.100.4.4      GigabitEthernet4

Columns are neighbor router ID, priority, adjacency state, dead time, the
neighbor's interface address and the local interface.
"""

from __future__ import annotations

from typing import Iterable, Iterator

from ospf_linkdisc.models import NeighborRow, RowParseError

NEIGHBOR_COLUMNS = 6


def parse_neighbor_rows(lines: str | Iterable[str]) -> Iterator[NeighborRow | RowParseError]:
    """Lazily split neighbor table lines into rows or per-line parse failures."""

    if isinstance(lines, str):
        lines = lines.splitlines()
    for line in lines:
        stripped = line.strip()
        if not stripped:
            continue
        yield parse_neighbor_line(stripped)


def parse_neighbor_line(line: str) -> NeighborRow | RowParseError:
    """Split a single neighbor table line on runs of whitespace."""

    tokens = line.split()
    if len(tokens) != NEIGHBOR_COLUMNS:
        return RowParseError(
            line=line,
            token_count=len(tokens),
            reason=f"expected {NEIGHBOR_COLUMNS} columns, got {len(tokens)}",
        )
    router_id, priority, state, dead_time, address, interface = tokens
    return NeighborRow(
        router_id=router_id,
        priority=priority,
        state=state,
        dead_time=dead_time,
        address=address,
        interface=interface,
        raw=line,
    )


def is_full_adjacency(row: NeighborRow, marker: str = "FULL") -> bool:
    """Return True when the adjacency state reports a full two-way relationship.

    The state column carries a role suffix (``FULL/DR``, ``FULL/BDR``,
    ``FULL/-``), so this is a containment test. Point-to-point rows printed as
    ``FULL/  -`` split into seven columns and are rejected by the parser first.
    """

    return marker in row.state
