"""
Payload Encoder
===============

Compression and text encoding for frame payloads.

Pipeline:
    pixel bytes -> zlib (default level) -> base64 text

This is the only place in the codebase that compresses or encodes
payloads. decode_payload is the exact inverse and exists for
verification and tooling.
"""

import base64
import binascii
import zlib

from video_to_df.errors import CompressionError


def compress(data: bytes) -> bytes:
    """
    Deflate `data` into a zlib stream at the default compression level.

    Raises:
        CompressionError: If zlib rejects the input
    """
    try:
        return zlib.compress(data, zlib.Z_DEFAULT_COMPRESSION)
    except zlib.error as e:
        raise CompressionError(f"Failed during zlib compression: {e}") from e


def encode(data: bytes) -> str:
    """Standard base64 (with padding) as ASCII text."""
    return base64.b64encode(data).decode("ascii")


def encode_payload(data: bytes) -> str:
    """Compress then encode a raw pixel payload."""
    return encode(compress(data))


def decode_payload(text: str) -> bytes:
    """
    Invert encode_payload.

    Raises:
        CompressionError: If the text is not valid base64 or zlib data
    """
    try:
        return zlib.decompress(base64.b64decode(text, validate=True))
    except (binascii.Error, zlib.error) as e:
        raise CompressionError(f"Failed to decode payload: {e}") from e
