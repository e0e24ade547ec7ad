import logging
import re
from typing import Callable, List, Optional, Tuple

import base58

from structs.bech32m import bech32_decode

logger = logging.getLogger(__name__)

HEX_PATTERN = re.compile(r'(?:[0-9a-fA-F]{2})+')


def decode_bech32m(text: str) -> Optional[bytes]:
    """Payload of a bech32/bech32m string, whatever its prefix."""
    hrp, data = bech32_decode(text)
    if hrp is None:
        return None
    return bytes(data)


def decode_hex(text: str) -> Optional[bytes]:
    """Payload of an even-length string made only of hex digits."""
    if not HEX_PATTERN.fullmatch(text):
        return None
    return bytes.fromhex(text)


def decode_base58(text: str) -> Optional[bytes]:
    """Payload of a base58 string (Bitcoin alphabet, no checksum)."""
    if not text:
        return None
    try:
        return base58.b58decode(text)
    except ValueError as e:
        logger.debug(f"Not base58: {e}")
        return None


# Tried in order: checksummed formats first, the loosest last.
PAYLOAD_DETECTORS: List[Tuple[str, Callable[[str], Optional[bytes]]]] = [
    ("bech32m", decode_bech32m),
    ("base16", decode_hex),
    ("base58", decode_base58),
]
