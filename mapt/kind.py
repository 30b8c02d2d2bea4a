"""Kind cluster cloud-config data: architectures and extra port mappings."""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import Enum
from typing import Any

_PROTOCOLS = ("TCP", "UDP")


class KindArch(str, Enum):
    """Architecture names as used by kind release artifacts."""

    X86_64 = "amd64"
    ARM64 = "arm64"


@dataclass
class PortMapping:
    """A port exposed from the kind node container to the host."""

    container_port: int
    host_port: int
    protocol: str

    def to_dict(self) -> dict[str, Any]:
        """Return the mapping in its JSON form."""
        return {
            "containerPort": self.container_port,
            "hostPort": self.host_port,
            "protocol": self.protocol,
        }


def _int_field(entry: dict[str, Any], key: str, index: int) -> int:
    value = entry.get(key, 0)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"port mapping {index}: {key} must be an integer, got {value!r}")
    return value


def _validated(entry: Any, index: int) -> PortMapping:
    if not isinstance(entry, dict):
        raise ValueError(f"port mapping {index}: expected an object, got {entry!r}")
    container_port = _int_field(entry, "containerPort", index)
    host_port = _int_field(entry, "hostPort", index)
    protocol = entry.get("protocol", "")
    if not isinstance(protocol, str):
        raise ValueError(f"port mapping {index}: protocol must be a string, got {protocol!r}")

    if container_port <= 0:
        raise ValueError(
            f"port mapping {index}: containerPort must be greater than 0, got {container_port}"
        )
    if host_port <= 0:
        raise ValueError(
            f"port mapping {index}: hostPort must be greater than 0, got {host_port}"
        )
    if not protocol:
        raise ValueError(f"port mapping {index}: protocol is required")
    normalized = protocol.upper()
    if normalized not in _PROTOCOLS:
        raise ValueError(
            f"port mapping {index}: protocol must be 'TCP' or 'UDP', got '{protocol}'"
        )
    return PortMapping(container_port, host_port, normalized)


def parse_extra_port_mappings(text: str) -> list[PortMapping]:
    """Parse and validate a JSON array of port mappings.

    An empty string gives an empty list. Protocols are normalised to upper
    case. Raises ValueError on malformed JSON or an invalid mapping.
    """
    if text == "":
        return []
    data = json.loads(text)
    if data is None:
        return []
    if not isinstance(data, list):
        raise ValueError("port mappings must be a JSON array")
    return [_validated(entry, index) for index, entry in enumerate(data)]