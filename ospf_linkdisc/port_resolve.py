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
"""Resolve a neighbor interface address to a port on the remote device."""

from __future__ import annotations

import logging

from ospf_linkdisc.models import UNRESOLVED_PORT, DeviceId, PortNumber
from ospf_linkdisc.registry import TopologyRegistry

_LOGGER = logging.getLogger(__name__)

PORT_IP_KEY = "ip"


def resolve_remote_port(
    device_id: DeviceId,
    address: str,
    registry: TopologyRegistry,
    router_id: str = "",
) -> PortNumber:
    """Find the port of ``device_id`` whose IP annotation contains ``address``.

    Port IP annotations must have been populated beforehand by port
    discovery. They are stored with a prefix length (``10.100.4.4/24``), so a
    containment test is used rather than equality.
    """

    for port in registry.list_ports(device_id):
        port_ip = port.annotations.get(PORT_IP_KEY)
        _LOGGER.debug("%s port %s has IP:%s", device_id, port.number, port_ip)
        if port_ip and address in port_ip:
            return port.number

    _LOGGER.warning(
        "Cannot resolve port number of IP:%s on router:%s",
        address,
        router_id or device_id,
    )
    return UNRESOLVED_PORT
