from ._base64 import KEY_SIZE, decode_key, encode_key

__all__ = ["KEY_SIZE", "decode_key", "encode_key"]
