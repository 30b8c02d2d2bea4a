"""Networking constants and security group rule specifications."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

NETWORKING_CIDR_ANY_IPV4 = "0.0.0.0/0"
NETWORKING_CIDR_ANY_IPV6 = "::/0"

CIDR_VN = "10.0.0.0/16"
CIDR_SN = "10.0.2.0/24"

SSH_PORT = 22
RDP_PORT = 3389


@dataclass(frozen=True)
class IngressRule:
    """An inbound rule: from a security group, a CIDR block, or anywhere."""

    description: str
    from_port: int
    to_port: int
    protocol: str
    cidr_blocks: str = ""
    security_group: str | None = None


SSH_TCP = IngressRule(description="SSH", from_port=SSH_PORT, to_port=SSH_PORT, protocol="tcp")
RDP_TCP = IngressRule(description="RDP", from_port=RDP_PORT, to_port=RDP_PORT, protocol="tcp")


def ingress_specs(rules: Iterable[IngressRule]) -> list[dict[str, Any]]:
    """Turn rules into ingress specifications.

    A rule naming a security group allows that group; otherwise its CIDR
    block is used, falling back to any IPv4 address.
    """
    specs = []
    for rule in rules:
        spec: dict[str, Any] = {
            "description": rule.description,
            "from_port": rule.from_port,
            "to_port": rule.to_port,
            "protocol": rule.protocol,
        }
        if rule.security_group is not None:
            spec["security_groups"] = [rule.security_group]
        elif rule.cidr_blocks:
            spec["cidr_blocks"] = [rule.cidr_blocks]
        else:
            spec["cidr_blocks"] = [NETWORKING_CIDR_ANY_IPV4]
        specs.append(spec)
    return specs


def egress_all() -> dict[str, Any]:
    """Egress specification allowing all traffic to any IPv4 or IPv6 address."""
    return {
        "from_port": 0,
        "to_port": 0,
        "protocol": "-1",
        "cidr_blocks": [NETWORKING_CIDR_ANY_IPV4],
        "ipv6_cidr_blocks": [NETWORKING_CIDR_ANY_IPV6],
    }