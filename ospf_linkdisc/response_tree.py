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
"""Extract CLI text blocks from NETCONF replies."""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET

from ospf_linkdisc.models import DIAG_MULTIPLE_SECTIONS

_LOGGER = logging.getLogger(__name__)

_RESPONSE_PATH = ("data", "cli-oper-data-block", "item", "response")


def extract_response_blocks(reply: str) -> list[str]:
    """Return the text of every ``data/cli-oper-data-block/item/response`` element.

    Replies that are not XML are treated as plain CLI output and returned as
    a single block.
    """

    cleaned = (reply or "").replace("\r", "")
    if not cleaned.lstrip().startswith("<"):
        return [cleaned] if cleaned.strip() else []

    try:
        root = ET.fromstring(cleaned.strip())
    except ET.ParseError as exc:
        _LOGGER.error("Failed to parse reply envelope: %s", exc)
        raise ValueError(f"reply is not well-formed XML: {exc}") from exc

    elements = [root]
    for name in _RESPONSE_PATH:
        elements = [
            child for element in elements for child in element if _local(child.tag) == name
        ]
    return [element.text or "" for element in elements]


def extract_neighbor_block(reply: str) -> tuple[str, tuple[str, ...]]:
    """Return the first response block plus any envelope diagnostics."""

    blocks = extract_response_blocks(reply)
    if not blocks:
        return "", ()
    if len(blocks) > 1:
        _LOGGER.warning(
            "Reply holds %s response sections where one was expected; using the first",
            len(blocks),
        )
        return blocks[0], (DIAG_MULTIPLE_SECTIONS,)
    return blocks[0], ()


def _local(tag: str) -> str:
    """Strip an ElementTree ``{namespace}`` prefix from a tag."""

    return tag.rsplit("}", 1)[-1]
