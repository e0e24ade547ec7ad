import logging
from typing import Optional, Tuple

from conv_lib.result import ErrorKind, Result
from structs.bech32m import bech32_decode, bech32_variant, bech32m_encode, hrp_parse
from structs.formats import PAYLOAD_DETECTORS

logger = logging.getLogger(__name__)

SUPPORTED_FORMATS = "Base16, Bech32m, Base58"


def decode(text: str) -> Result:
    """Decodes a bech32m string and returns its payload as lowercase hex."""
    hrp, data = bech32_decode(text)
    if hrp is None:
        logger.info(f"Rejected bech32m input {text!r}")
        return Result(False, error="Invalid bech32m string", kind=ErrorKind.InvalidEncoding)
    logger.debug(f"Decoded {len(data)} bytes under prefix {hrp!r}")
    return Result(True, bytes(data).hex())


def detect_format(text: str) -> Tuple[Optional[str], Optional[bytes]]:
    """
    Finds the first supported encoding that `text` decodes under.

    :param text: The encoded input.
    :return: A tuple (format name, payload), or (None, None) if no format matches.
    """
    for name, decoder in PAYLOAD_DETECTORS:
        payload = decoder(text)
        if payload is not None:
            logger.debug(f"Input detected as {name}")
            return name, payload
        logger.debug(f"Input is not {name}")
    return None, None


def encode(text: str, prefix: str) -> Result:
    """
    Re-encodes `text` to bech32m under `prefix`.

    The input may be bech32m (any prefix), hex or base58, tried in that order.
    A string that is valid bech32m is never reinterpreted as hex or base58.
    """
    if hrp_parse(prefix) is None:
        return Result(False, error=f"Invalid prefix: {prefix!r}", kind=ErrorKind.InvalidPrefix)

    name, payload = detect_format(text)
    if name is None:
        logger.info(f"Unrecognized input {text!r}")
        return Result(False, error=f"Unable to decode input. Supported formats: {SUPPORTED_FORMATS}",
                      kind=ErrorKind.UnrecognizedFormat)
    if name == "bech32m":
        logger.debug(f"Re-prefixing a {bech32_variant(text)} string")

    try:
        return Result(True, bech32m_encode(prefix, payload))
    except ValueError as e:
        return Result(False, error=f"Encoding error: {e}", kind=ErrorKind.EncodingFailed)
