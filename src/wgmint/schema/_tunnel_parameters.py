from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TunnelParameters:
    """
    Network parameters rendered into a peer configuration.

    Every string is embedded verbatim; nothing here is validated.

    Attributes:
        client_address (str): `Address` of the client interface, e.g. "10.0.0.2/32".
        dns (str): `DNS` server(s) for the client interface.
        server_public_key (str): base64 public key of the server peer.
        server_endpoint (str): `host:port` of the server peer.
        allowed_ips (str): `AllowedIPs` routed through the tunnel.
        persistent_keepalive_seconds (int): keep-alive interval, 0 disables it.

    Example:
    ```
        params = TunnelParameters(
            client_address="10.0.0.2/32",
            dns="1.1.1.1",
            server_public_key="<server key>",
            server_endpoint="vpn.example.com:51820",
            allowed_ips="0.0.0.0/0",
            persistent_keepalive_seconds=25,
        )
    ```
    """

    client_address: str
    dns: str
    server_public_key: str
    server_endpoint: str
    allowed_ips: str
    persistent_keepalive_seconds: int = 25
