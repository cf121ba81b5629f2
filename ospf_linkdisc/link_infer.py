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
"""Link inference from OSPF neighbor tables."""

from __future__ import annotations

import logging

from ospf_linkdisc.identity import resolve_device_id
from ospf_linkdisc.models import (
    DIAG_DEVICE_UNRESOLVED,
    DIAG_LOCAL_PORT_UNPARSABLE,
    DIAG_PORT_UNRESOLVED,
    DIAG_ROW_MALFORMED,
    UNRESOLVED_PORT,
    DeviceId,
    DiscoveryResult,
    Endpoint,
    LinkRecord,
    LinkSet,
    LinkType,
    NeighborRow,
    RowParseError,
)
from ospf_linkdisc.neighbor_parse import is_full_adjacency, parse_neighbor_rows
from ospf_linkdisc.normalize import parse_local_port
from ospf_linkdisc.port_resolve import resolve_remote_port
from ospf_linkdisc.registry import TopologyRegistry
from ospf_linkdisc.response_tree import extract_neighbor_block
from ospf_linkdisc.session import DeviceSession
from ospf_linkdisc.settings import POLICY_DROP, DiscoverySettings

_LOGGER = logging.getLogger(__name__)


def discover_links(
    device_id: DeviceId,
    session: DeviceSession,
    registry: TopologyRegistry,
    settings: DiscoverySettings | None = None,
) -> LinkSet:
    """Discover links from ``device_id`` to its fully adjacent OSPF neighbors.

    ``SessionError`` from the session propagates; every other problem only
    skips the affected row.
    """

    return collect_links(device_id, session, registry, settings).links


def collect_links(
    device_id: DeviceId,
    session: DeviceSession,
    registry: TopologyRegistry,
    settings: DiscoverySettings | None = None,
) -> DiscoveryResult:
    """Run one poll and return links together with diagnostic codes."""

    reply = session.fetch_neighbor_table(device_id)
    block, envelope_errors = extract_neighbor_block(reply)
    result = assemble_links(device_id, block, registry, settings)
    if not envelope_errors:
        return result
    return DiscoveryResult(result.links, envelope_errors + result.diagnostics)


def assemble_links(
    local_device: DeviceId,
    block: str,
    registry: TopologyRegistry,
    settings: DiscoverySettings | None = None,
) -> DiscoveryResult:
    """Build link records from the neighbor table text of ``local_device``."""

    settings = settings or DiscoverySettings()
    candidates = settings.candidates()
    links: set[LinkRecord] = set()
    errors: list[str] = []

    for row in parse_neighbor_rows(block):
        if isinstance(row, RowParseError):
            _LOGGER.warning("Skipping malformed OSPF neighbor row %r: %s", row.line, row.reason)
            errors.append(DIAG_ROW_MALFORMED)
            continue
        _LOGGER.debug("OSPF neighbor: %s", row.raw)
        if not is_full_adjacency(row, settings.full_state_marker):
            continue

        try:
            local_port = parse_local_port(row.interface, settings.local_interface_prefixes)
        except ValueError as exc:
            _LOGGER.warning("Skipping OSPF neighbor %s: %s", row.router_id, exc)
            errors.append(DIAG_LOCAL_PORT_UNPARSABLE)
            continue

        remote_device = resolve_device_id(row.router_id, registry, candidates)
        if remote_device is None:
            errors.append(DIAG_DEVICE_UNRESOLVED)
            continue

        remote_port = resolve_remote_port(remote_device, row.address, registry, row.router_id)
        if remote_port == UNRESOLVED_PORT:
            errors.append(DIAG_PORT_UNRESOLVED)
            if settings.unresolved_port_policy == POLICY_DROP:
                continue

        links.add(_build_link(local_device, local_port, remote_device, remote_port, row))

    _LOGGER.info("Discovered %s links from %s", len(links), local_device)
    return DiscoveryResult(frozenset(links), tuple(errors))


def _build_link(
    local_device: DeviceId,
    local_port: int,
    remote_device: DeviceId,
    remote_port: int,
    row: NeighborRow,
) -> LinkRecord:
    """Create a direct link record for an adjacency row."""

    _LOGGER.debug(
        "Link %s/%s -> %s/%s via %s",
        local_device,
        local_port,
        remote_device,
        remote_port,
        row.interface,
    )
    return LinkRecord(
        src=Endpoint(local_device, local_port),
        dst=Endpoint(remote_device, remote_port),
        link_type=LinkType.DIRECT,
    )
