from __future__ import annotations

import ipaddress
import re

from wgmint.encoding import decode_key
from wgmint.exceptions import InvalidTunnelParameters
from wgmint.schema import TunnelParameters

_HOSTNAME = re.compile(
    r"(?=.{1,253}\Z)([A-Za-z0-9]([A-Za-z0-9-]{0,61}[A-Za-z0-9])?)(\.[A-Za-z0-9]([A-Za-z0-9-]{0,61}[A-Za-z0-9])?)*\.?"
)
MAX_PORT = 65535
MAX_KEEPALIVE = 65535


def _has_control_characters(value: str) -> bool:
    return any(ord(char) < 32 or ord(char) == 127 for char in value)


def _split(value: str) -> list[str]:
    return [item.strip() for item in value.split(",")]


def _check_addresses(label: str, value: str) -> list[str]:
    problems: list[str] = []
    for item in _split(value):
        try:
            ipaddress.ip_interface(item)
        except ValueError:
            problems.append(f"{label}: {item!r} is not a valid address/CIDR")
    return problems


def _check_dns(value: str) -> list[str]:
    if not value.strip():
        return []
    problems: list[str] = []
    for item in _split(value):
        try:
            ipaddress.ip_address(item)
        except ValueError:
            if not _HOSTNAME.fullmatch(item):
                problems.append(f"DNS: {item!r} is neither an IP address nor a hostname")
    return problems


def _check_endpoint(value: str) -> list[str]:
    host, sep, port = value.rpartition(":")
    if not sep or not host:
        return [f"Endpoint: {value!r} must be host:port"]
    if host.startswith("[") and host.endswith("]"):
        try:
            ipaddress.IPv6Address(host[1:-1])
        except ValueError:
            return [f"Endpoint: {host!r} is not a valid IPv6 address"]
    elif ":" in host:
        return [f"Endpoint: IPv6 host {host!r} must be enclosed in brackets"]
    else:
        try:
            ipaddress.IPv4Address(host)
        except ValueError:
            if not _HOSTNAME.fullmatch(host):
                return [f"Endpoint: {host!r} is not a valid host"]
    if not (port.isascii() and port.isdigit()) or not 1 <= int(port) <= MAX_PORT:
        return [f"Endpoint: port {port!r} must be between 1 and {MAX_PORT}"]
    return []


def _check_public_key(value: str) -> list[str]:
    try:
        decode_key(value)
    except ValueError as error:
        return [f"PublicKey: {error}"]
    return []


def validate_tunnel_parameters(params: TunnelParameters) -> list[str]:
    """
    Check tunnel parameters for syntax problems.

    Returns a list of human-readable problems, empty when the parameters
    look usable. This is a separate pre-flight step; `ConfigFormatter`
    never calls it.
    """
    problems: list[str] = []
    checks = [
        ("Address", params.client_address, lambda value: _check_addresses("Address", value)),
        ("DNS", params.dns, _check_dns),
        ("PublicKey", params.server_public_key, _check_public_key),
        ("Endpoint", params.server_endpoint, _check_endpoint),
        ("AllowedIPs", params.allowed_ips, lambda value: _check_addresses("AllowedIPs", value)),
    ]
    for label, value, check in checks:
        # A line break in any field splits the rendered config.
        if _has_control_characters(value):
            problems.append(f"{label}: {value!r} contains a line break or control character")
        else:
            problems += check(value)
    if not 0 <= params.persistent_keepalive_seconds <= MAX_KEEPALIVE:
        problems.append(
            f"PersistentKeepalive: {params.persistent_keepalive_seconds} "
            f"must be between 0 and {MAX_KEEPALIVE}"
        )
    return problems


def ensure_valid_tunnel_parameters(params: TunnelParameters) -> TunnelParameters:
    """Return `params` unchanged, or raise `InvalidTunnelParameters`."""
    problems = validate_tunnel_parameters(params)
    if problems:
        raise InvalidTunnelParameters(problems)
    return params
