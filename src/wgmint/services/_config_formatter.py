from __future__ import annotations

from wgmint.encoding import encode_key
from wgmint.schema import GeneratedArtifact, KeyPair, TunnelParameters

CONFIG_TEMPLATE = """
[Interface]
PrivateKey = {private_key}
Address = {client_address}
DNS = {dns}

[Peer]
PublicKey = {server_public_key}
Endpoint = {server_endpoint}
AllowedIPs = {allowed_ips}
PersistentKeepalive = {persistent_keepalive_seconds}
"""


class ConfigFormatter:
    """
    Renders a key pair and tunnel parameters into a WireGuard peer config.

    Fields are interpolated verbatim. A value containing a newline or `=`
    produces a broken config; checking for that belongs to
    `wgmint.validators`, not here.
    """

    def format(self, key_pair: KeyPair, params: TunnelParameters) -> GeneratedArtifact:
        config_text = CONFIG_TEMPLATE.format(
            private_key=encode_key(key_pair.private_key),
            client_address=params.client_address,
            dns=params.dns,
            server_public_key=params.server_public_key,
            server_endpoint=params.server_endpoint,
            allowed_ips=params.allowed_ips,
            persistent_keepalive_seconds=params.persistent_keepalive_seconds,
        ).strip()
        return GeneratedArtifact(
            config_text=config_text,
            client_public_key_encoded=encode_key(key_pair.public_key),
        )
