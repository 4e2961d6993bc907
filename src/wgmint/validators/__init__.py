from ._tunnel_validator import ensure_valid_tunnel_parameters, validate_tunnel_parameters

__all__ = ["ensure_valid_tunnel_parameters", "validate_tunnel_parameters"]
