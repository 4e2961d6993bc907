from pytest import fixture

from wgmint.schema import KeyPair, TunnelParameters
from wgmint.services import ConfigFormatter, ConfigMint, KeyPairGenerator
from wgmint.settings import Settings
from wgmint.stores import ArtifactStore

# RFC 7748, section 6.1 (Alice).
RFC7748_PRIVATE_KEY = bytes.fromhex(
    "77076d0a7318a57d3c16c17251b26645df4c2f87ebc0992ab177fba51db92c2a"
)
RFC7748_PUBLIC_KEY = bytes.fromhex(
    "8520f0098930a754748b7ddcb43ef75a0dbf3a0d26381af4eba4a98eaa9b4e6a"
)
SERVER_PUBLIC_KEY = "hSDwCYkwp1R0i33ctD73Wg2/Og0mOBr066SpjqqbTmo="


@fixture
def tunnel_parameters() -> TunnelParameters:
    """Parameters matching the reference peer layout."""
    return TunnelParameters(
        client_address="10.0.0.2/32",
        dns="1.1.1.1",
        server_public_key="SERVERKEYBASE64",
        server_endpoint="vpn.example.com:51820",
        allowed_ips="0.0.0.0/0",
        persistent_keepalive_seconds=25,
    )


@fixture
def fixed_key_pair() -> KeyPair:
    """Key pair derived from the RFC 7748 test scalar."""
    return KeyPairGenerator.from_private_key(RFC7748_PRIVATE_KEY)


@fixture
def formatter() -> ConfigFormatter:
    return ConfigFormatter()


@fixture
def config_mint(tmp_path) -> ConfigMint:
    """Create a config mint that saves into a temporary directory."""
    return ConfigMint(
        settings=Settings(server_public_key=SERVER_PUBLIC_KEY),
        store=ArtifactStore(tmp_path / "out"),
    )


@fixture
def rfc7748_private_key() -> bytes:
    return RFC7748_PRIVATE_KEY


@fixture
def rfc7748_public_key() -> bytes:
    return RFC7748_PUBLIC_KEY


@fixture
def server_public_key() -> str:
    """A well-formed server key (the RFC 7748 public key in base64)."""
    return SERVER_PUBLIC_KEY
