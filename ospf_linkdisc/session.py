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
"""Device sessions used to fetch OSPF neighbor and interface tables."""

from __future__ import annotations

import logging
from typing import Any, Callable, Mapping, Protocol

from netmiko import ConnectHandler
from netmiko.exceptions import (
    NetmikoAuthenticationException,
    NetmikoTimeoutException,
    ReadTimeout,
)

from ospf_linkdisc.models import DeviceId

_LOGGER = logging.getLogger(__name__)

NEIGHBOR_COMMAND = "show ip ospf neighbor | include Ethernet"
INTERFACES_COMMAND = (
    "show interfaces | include (line protocol)|(bia)|(Internet address is)|(BW [0-9]+ Kbit/sec)"
)


class SessionError(RuntimeError):
    """Raised when the device could not be queried."""


class DeviceSession(Protocol):
    """Anything able to return the raw neighbor table reply for a device."""

    def fetch_neighbor_table(self, device_id: DeviceId) -> str:
        ...


class PortSession(Protocol):
    """Anything able to return the raw interface status reply for a device."""

    def fetch_interfaces(self, device_id: DeviceId) -> str:
        ...


def build_neighbor_query_rpc() -> str:
    """Build the NETCONF get request for the OSPF neighbor table."""

    return _build_cli_rpc(NEIGHBOR_COMMAND)


def build_interfaces_query_rpc() -> str:
    """Build the NETCONF get request used by port discovery."""

    return _build_cli_rpc(INTERFACES_COMMAND)


def _build_cli_rpc(command: str) -> str:
    """Wrap an exec command in a NETCONF get filter; the message ID is injected by the client."""

    return "".join(
        [
            '<?xml version="1.0" encoding="UTF-8"?>',
            '<rpc xmlns="urn:ietf:params:xml:ns:netconf:base:1.0">',
            "<get>",
            "<filter>",
            "<config-format-text-cmd>",
            "<text-filter-spec> | include interface </text-filter-spec>",
            "</config-format-text-cmd>",
            "<oper-data-format-text-block>",
            f"<exec>{_escape(command)}</exec>",
            "</oper-data-format-text-block>",
            "</filter>",
            "</get>",
            "</rpc>",
        ]
    )


def _escape(text: str) -> str:
    return text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")


class RpcSession:
    """Session that sends CLI queries through a NETCONF client callable.

    ``transport_errors`` lists the exception types the client raises on
    transport or timeout failures; they are reported as ``SessionError``.
    """

    def __init__(
        self,
        send_rpc: Callable[[DeviceId, str], str],
        transport_errors: tuple[type[BaseException], ...] = (OSError,),
    ) -> None:
        self._send_rpc = send_rpc
        self._transport_errors = transport_errors

    def fetch_neighbor_table(self, device_id: DeviceId) -> str:
        return self._send(device_id, build_neighbor_query_rpc(), "OSPF neighbors")

    def fetch_interfaces(self, device_id: DeviceId) -> str:
        return self._send(device_id, build_interfaces_query_rpc(), "interfaces")

    def _send(self, device_id: DeviceId, rpc: str, what: str) -> str:
        try:
            reply = self._send_rpc(device_id, rpc)
        except self._transport_errors as exc:
            _LOGGER.error("Failed to retrieve %s from %s: %s", what, device_id, exc)
            raise SessionError(f"failed to retrieve configuration from {device_id}") from exc
        _LOGGER.debug("Device %s replies %s", device_id, reply.replace("\r", ""))
        return reply


class NetmikoSession:
    """Session that runs show commands over SSH with netmiko."""

    def __init__(self, connection_params: Mapping[str, Any]) -> None:
        self._params = dict(connection_params)

    def fetch_neighbor_table(self, device_id: DeviceId) -> str:
        return self._run(device_id, NEIGHBOR_COMMAND)

    def fetch_interfaces(self, device_id: DeviceId) -> str:
        return self._run(device_id, INTERFACES_COMMAND)

    def _run(self, device_id: DeviceId, command: str) -> str:
        device = dict(self._params)
        device.setdefault("host", device_host(device_id))
        try:
            conn = ConnectHandler(**device)
            try:
                conn.enable()
                output = conn.send_command(command)
            finally:
                conn.disconnect()
        except (
            NetmikoTimeoutException,
            NetmikoAuthenticationException,
            ReadTimeout,
            OSError,
        ) as exc:
            _LOGGER.error("Failed to run %r on %s: %s", command, device_id, exc)
            raise SessionError(f"failed to run {command!r} on {device_id}") from exc
        _LOGGER.debug("Device %s replies %s", device_id, str(output).replace("\r", ""))
        return str(output)


def device_host(device_id: DeviceId) -> str:
    """Extract the host from a ``scheme:host:port`` device ID."""

    _, _, remainder = device_id.partition(":")
    host, sep, port = remainder.rpartition(":")
    if not sep or not port.isdigit():
        return remainder or device_id
    return host
