from __future__ import annotations

from dataclasses import dataclass, fields, replace
from os import environ
from typing import Any, Mapping

from dotenv import dotenv_values, find_dotenv

from wgmint.exceptions import SettingsConfigurationError
from wgmint.schema import TunnelParameters

ENV_PREFIX = "WGMINT_"


@dataclass(frozen=True)
class Settings:
    """
    Default tunnel parameters and output options.

    Attributes:
        client_address (str): Client interface address (default: "10.0.0.2/32").
        dns (str): DNS server(s) for the client (default: "1.1.1.1").
        server_public_key (str): Server peer's base64 public key (default: "").
        server_endpoint (str): Server `host:port` (default: "vpn.example.com:51820").
        allowed_ips (str): Routed ranges (default: "0.0.0.0/0").
        persistent_keepalive_seconds (int): Keep-alive interval (default: 25).
        output_filename (str): Name used when saving the config (default: "wg0.conf").

    Example:
    ```
        settings = Settings(
            server_public_key="<server key>",
            server_endpoint="vpn.example.com:51820",
        )
    ```
    """

    client_address: str = "10.0.0.2/32"
    dns: str = "1.1.1.1"
    server_public_key: str = ""
    server_endpoint: str = "vpn.example.com:51820"
    allowed_ips: str = "0.0.0.0/0"
    persistent_keepalive_seconds: int = 25
    output_filename: str = "wg0.conf"

    @classmethod
    def from_environ(
        cls,
        env: Mapping[str, str] | None = None,
        dotenv: bool = True,
    ) -> Settings:
        """
        Build settings from `WGMINT_*` variables, e.g.:
        - WGMINT_SERVER_PUBLIC_KEY = "<server key>"
        - WGMINT_SERVER_ENDPOINT = "vpn.example.com:51820"
        - WGMINT_PERSISTENT_KEEPALIVE_SECONDS = "25"

        Unset variables keep their defaults. When `env` is not given the
        process environment is used, layered over the values of the nearest
        `.env` file when `dotenv` is set. `os.environ` itself is never modified.
        """
        if env is None:
            merged: dict[str, str] = {}
            if dotenv:
                path = find_dotenv(usecwd=True)
                if path:
                    merged.update(
                        (key, value)
                        for key, value in dotenv_values(path).items()
                        if value is not None
                    )
            merged.update(environ)
            env = merged

        values: dict[str, Any] = {}
        for field in fields(cls):
            key = f"{ENV_PREFIX}{field.name.upper()}"
            if key not in env:
                continue
            raw = env[key]
            if isinstance(field.default, int):
                values[field.name] = cls._parse_seconds(key, raw)
            else:
                values[field.name] = raw
        return cls(**values)

    @staticmethod
    def _parse_seconds(key: str, raw: str) -> int:
        try:
            value = int(raw.strip())
        except ValueError:
            raise SettingsConfigurationError(
                f"{key} must be a whole number of seconds, got {raw!r}. "
                "Use 0 to disable keep-alive, for example:\n\n"
                f"    {key} = '25'"
            ) from None
        if value < 0:
            raise SettingsConfigurationError(f"{key} must not be negative, got {value}")
        return value

    def tunnel_parameters(self, **overrides: Any) -> TunnelParameters:
        """Return `TunnelParameters` from these settings, with optional overrides."""
        params = TunnelParameters(
            client_address=self.client_address,
            dns=self.dns,
            server_public_key=self.server_public_key,
            server_endpoint=self.server_endpoint,
            allowed_ips=self.allowed_ips,
            persistent_keepalive_seconds=self.persistent_keepalive_seconds,
        )
        return replace(params, **overrides) if overrides else params
