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
"""Port discovery from filtered ``show interfaces`` output.

Expected input, one block per interface::

    GigabitEthernet1 is up, line protocol is up
      Hardware is CSR vNIC, address is 2cc2.6058.f7d5 (bia 2cc2.6058.f7d5)
      Internet address is 192.168.0.4/24
      MTU 1500 bytes, BW 1000000 Kbit/sec, DLY 10 usec,

Interfaces are numbered from 1 in order of appearance.
"""

from __future__ import annotations

import logging
import re

from ospf_linkdisc.models import DeviceId, Port
from ospf_linkdisc.registry import InMemoryRegistry
from ospf_linkdisc.response_tree import extract_response_blocks
from ospf_linkdisc.session import PortSession

_LOGGER = logging.getLogger(__name__)

ZERO_MAC = "00:00:00:00:00:00"
ZERO_IP = "0.0.0.0/0"

_HEADER_RE = re.compile(r"^(?P<name>\S+) is (?P<status>.+)$", re.MULTILINE)
_MAC_RE = re.compile(r"([0-9a-fA-F]{4})\.([0-9a-fA-F]{4})\.([0-9a-fA-F]{4})")
_IP_RE = re.compile(r"(\d{1,3}\.\d{1,3}\.\d{1,3}\.\d{1,3})/(\d{1,2})")
_BW_RE = re.compile(r"BW (\d+) Kbit/sec")


def discover_ports(device_id: DeviceId, session: PortSession) -> list[Port]:
    """Query a device for its interfaces and parse them into ports.

    ``SessionError`` from the session propagates.
    """

    reply = session.fetch_interfaces(device_id)
    blocks = extract_response_blocks(reply)
    if not blocks:
        _LOGGER.warning("Device %s returned no interface status", device_id)
        return []
    if len(blocks) > 1:
        _LOGGER.warning(
            "Device %s returned %s interface sections; using the first",
            device_id,
            len(blocks),
        )
    ports = parse_interface_ports(blocks[0])
    _LOGGER.info("Discovered %s ports on %s", len(ports), device_id)
    return ports


def register_ports(
    registry: InMemoryRegistry,
    device_id: DeviceId,
    session: PortSession,
) -> list[Port]:
    """Discover ports of ``device_id`` and record them in ``registry``."""

    ports = discover_ports(device_id, session)
    registry.add_device(device_id, ports)
    return ports


def parse_interface_ports(text: str) -> list[Port]:
    """Parse interface status text into ports annotated with name, MAC, IP and speed."""

    cleaned = (text or "").replace("\r", "")
    headers = [
        match
        for match in _HEADER_RE.finditer(cleaned)
        if "line protocol" in match.group("status")
    ]
    ports: list[Port] = []
    for index, header in enumerate(headers):
        end = headers[index + 1].start() if index + 1 < len(headers) else len(cleaned)
        body = cleaned[header.end() : end]
        status = header.group("status")
        annotations = {
            "name": header.group("name"),
            "enabled": "true" if "up" in status else "false",
            "mac": _parse_mac(body),
            "ip": _parse_ip(body),
            "speed": str(_parse_speed_mbps(body)),
        }
        ports.append(Port(number=index + 1, annotations=annotations))

    if cleaned.strip() and not ports:
        _LOGGER.error("Failed to match any interface in port status output")
    return ports


def _parse_mac(text: str) -> str:
    """Return the first ``xxxx.xxxx.xxxx`` address as colon separated hex."""

    match = _MAC_RE.search(text)
    if not match:
        return ZERO_MAC
    digits = "".join(match.groups()).lower()
    return ":".join(digits[pos : pos + 2] for pos in range(0, 12, 2))


def _parse_ip(text: str) -> str:
    match = _IP_RE.search(text)
    if not match:
        return ZERO_IP
    return match.group(0)


def _parse_speed_mbps(text: str) -> int:
    match = _BW_RE.search(text)
    if not match:
        return 0
    return int(match.group(1)) // 1000
