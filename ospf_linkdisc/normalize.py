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
"""Interface name normalization utilities."""

from __future__ import annotations

import re
from typing import Sequence

from ospf_linkdisc.models import PortNumber

DEFAULT_INTERFACE_PREFIXES: tuple[str, ...] = ("GigabitEthernet",)


def parse_local_port(
    interface: str,
    prefixes: Sequence[str] = DEFAULT_INTERFACE_PREFIXES,
) -> PortNumber:
    """Convert a local interface name such as ``GigabitEthernet4`` to port 4.

    Interfaces are numbered from 1 on the routers this targets, so the
    numeral following the interface type is the port number.
    """

    cleaned = re.sub(r"\s+", "", interface or "")
    lowered = cleaned.lower()
    # longest prefix first so "TenGigabitEthernet" wins over "Ten"
    for prefix in sorted(prefixes, key=len, reverse=True):
        if lowered.startswith(prefix.lower()):
            suffix = cleaned[len(prefix) :]
            break
    else:
        raise ValueError(f"interface {interface!r} has no known type prefix")

    if not suffix.isdigit():
        raise ValueError(f"interface {interface!r} has non-numeric suffix {suffix!r}")
    return int(suffix)
