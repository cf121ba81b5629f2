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
"""Resolve OSPF router IDs to device identities known to the registry.

A router ID is only a bare address (by default the address of the
neighbor's first interface). The same router may have been onboarded under
different device identities depending on the transport port that was used,
so candidates are built for every known convention and probed in order.
"""

from __future__ import annotations

import ipaddress
import logging
from typing import Callable, Sequence

from ospf_linkdisc.models import DeviceId
from ospf_linkdisc.registry import TopologyRegistry

_LOGGER = logging.getLogger(__name__)

CandidateBuilder = Callable[[str], DeviceId]


def uri_candidate(scheme: str, port: int) -> CandidateBuilder:
    """Return a builder producing ``<scheme>:<address>:<port>`` identities."""

    def build(address: str) -> DeviceId:
        ipaddress.ip_address(address)
        return f"{scheme}:{address}:{port}"

    return build


DEFAULT_CANDIDATES: tuple[CandidateBuilder, ...] = (
    uri_candidate("netconf", 22),
    uri_candidate("netconf", 830),
)


def build_candidates(
    router_id: str,
    candidates: Sequence[CandidateBuilder] = DEFAULT_CANDIDATES,
) -> list[DeviceId]:
    """Build candidate identities for a router ID in probing order."""

    built: list[DeviceId] = []
    for builder in candidates:
        try:
            built.append(builder(router_id))
        except ValueError as exc:
            _LOGGER.debug("Skipping candidate for router %s: %s", router_id, exc)
    return built


def resolve_device_id(
    router_id: str,
    registry: TopologyRegistry,
    candidates: Sequence[CandidateBuilder] = DEFAULT_CANDIDATES,
) -> DeviceId | None:
    """Return the first registered device matching a router ID, or None."""

    for candidate in build_candidates(router_id, candidates):
        device_id = registry.find_device(candidate)
        if device_id is not None:
            _LOGGER.debug("Router %s resolved to %s", router_id, device_id)
            return device_id
    _LOGGER.warning("Cannot resolve device for router ID %s", router_id)
    return None
