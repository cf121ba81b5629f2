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
"""Data models for ospf-linkdisc."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, Mapping

DeviceId = str
PortNumber = int

UNRESOLVED_PORT: PortNumber = -1

DIAG_ROW_MALFORMED = "NEIGHBOR_ROW_MALFORMED"
DIAG_LOCAL_PORT_UNPARSABLE = "LOCAL_PORT_UNPARSABLE"
DIAG_DEVICE_UNRESOLVED = "REMOTE_DEVICE_UNRESOLVED"
DIAG_PORT_UNRESOLVED = "REMOTE_PORT_UNRESOLVED"
DIAG_MULTIPLE_SECTIONS = "RESPONSE_MULTIPLE_SECTIONS"


class LinkType(str, Enum):
    """Kind of link between two connect points."""

    DIRECT = "DIRECT"
    INDIRECT = "INDIRECT"


@dataclass(frozen=True)
class NeighborRow:
    """One well-formed line of the OSPF neighbor table."""

    router_id: str
    priority: str
    state: str
    dead_time: str
    address: str
    interface: str
    raw: str = ""


@dataclass(frozen=True)
class RowParseError:
    """A neighbor table line that could not be split into the expected columns."""

    line: str
    token_count: int
    reason: str


@dataclass(frozen=True)
class Port:
    """Registry view of a device port."""

    number: PortNumber
    annotations: Mapping[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class Endpoint:
    """Device and port pair at one end of a link."""

    device: DeviceId
    port: PortNumber


@dataclass(frozen=True)
class LinkRecord:
    """Discovered link from the polled device towards a neighbor."""

    src: Endpoint
    dst: Endpoint
    link_type: LinkType = LinkType.DIRECT
    direction: str = "unidirectional"


LinkSet = FrozenSet[LinkRecord]


@dataclass(frozen=True)
class DiscoveryResult:
    """Links plus diagnostic codes produced by one poll."""

    links: LinkSet
    diagnostics: tuple[str, ...] = ()
