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
"""Tests for NETCONF reply block extraction."""

import pytest

from ospf_linkdisc.models import DIAG_MULTIPLE_SECTIONS
from ospf_linkdisc.response_tree import extract_neighbor_block, extract_response_blocks

REPLY = (
    '<?xml version="1.0" encoding="UTF-8"?>\r\n'
    '<rpc-reply message-id="101" xmlns="urn:ietf:params:xml:ns:netconf:base:1.0">'
    "<data>"
    "<cli-config-data><cmd>interface GigabitEthernet1</cmd></cli-config-data>"
    "<cli-oper-data-block><item>"
    "<exec>show ip ospf neighbor | include Ethernet</exec>"
    "<response>\r\n192.168.0.4       1   FULL/DR         00:00:31    10.100.4.4      "
    "GigabitEthernet4\r\n</response>"
    "</item></cli-oper-data-block>"
    "</data></rpc-reply>"
)


def test_extract_response_blocks_namespaced_reply() -> None:
    blocks = extract_response_blocks(REPLY)

    assert len(blocks) == 1
    assert "\r" not in blocks[0]
    assert "GigabitEthernet4" in blocks[0]


def test_extract_response_blocks_plain_text() -> None:
    text = "192.168.0.4  1  FULL/DR  00:00:31  10.100.4.4  GigabitEthernet4\r\n"

    assert extract_response_blocks(text) == [
        "192.168.0.4  1  FULL/DR  00:00:31  10.100.4.4  GigabitEthernet4\n"
    ]


def test_extract_response_blocks_empty_reply() -> None:
    assert extract_response_blocks("") == []
    assert extract_neighbor_block("") == ("", ())


def test_extract_response_blocks_malformed_xml() -> None:
    with pytest.raises(ValueError, match="not well-formed"):
        extract_response_blocks("<rpc-reply><data>")


def test_extract_neighbor_block_single_section() -> None:
    block, diagnostics = extract_neighbor_block(REPLY)

    assert "FULL/DR" in block
    assert diagnostics == ()


def test_extract_neighbor_block_multiple_sections() -> None:
    reply = (
        "<rpc-reply><data><cli-oper-data-block>"
        "<item><response>first</response></item>"
        "<item><response>second</response></item>"
        "</cli-oper-data-block></data></rpc-reply>"
    )

    block, diagnostics = extract_neighbor_block(reply)

    assert block == "first"
    assert diagnostics == (DIAG_MULTIPLE_SECTIONS,)
