import logging
from typing import List, Optional, Tuple

from config.settings import MAX_CODE_LENGTH

logger = logging.getLogger(__name__)

CHARSET = "qpzry9x8gf2tvdw0s3jn54khce6mua7l"
SEPARATOR = "1"
CHECKSUM_LENGTH = 6
HRP_MAX_LENGTH = 83

BECH32_CONST = 1
BECH32M_CONST = 0x2bc830a3


def polymod(values):
    """Internal polynomial modulus operation for checksum calculation."""
    generator = [0x3b6a57b2, 0x26508e6d, 0x1ea119fa, 0x3d4233dd, 0x2a1462b3]
    checksum = 1
    for value in values:
        top = checksum >> 25
        checksum = ((checksum & 0x1FFFFFF) << 5) ^ value
        for i in range(5):
            if top & (1 << i):
                checksum ^= generator[i]
    return checksum


def bech32_hrp_expand(hrp):
    """Expands the human-readable part for checksum calculation."""
    return [ord(x) >> 5 for x in hrp] + [0] + [ord(x) & 31 for x in hrp]


def hrp_parse(hrp: str) -> Optional[str]:
    """
    Validates a human-readable part and returns its lowercase form.

    The HRP must hold 1 to 83 characters, all printable ASCII (33..126),
    and must not mix upper and lower case.

    :param hrp: Candidate prefix.
    :return: The lowercase HRP, or None if it is not valid.
    """
    if not hrp or len(hrp) > HRP_MAX_LENGTH:
        return None
    if any(ord(x) < 33 or ord(x) > 126 for x in hrp):
        return None
    if hrp.lower() != hrp and hrp.upper() != hrp:
        return None
    return hrp.lower()


def bech32_create_checksum(hrp, data, const=BECH32M_CONST):
    values = bech32_hrp_expand(hrp) + data
    checksum = polymod(values + [0] * CHECKSUM_LENGTH) ^ const
    return [(checksum >> 5 * (5 - i)) & 31 for i in range(CHECKSUM_LENGTH)]


def bech32_encode(hrp, data):
    """Assuming data is already in 5-bit groups, appends the bech32m checksum."""
    combined = data + bech32_create_checksum(hrp, data)
    return hrp + SEPARATOR + ''.join([CHARSET[d] for d in combined])


def bech32m_encode(hrp: str, data) -> str:
    """Encode 8-bit data to bech32m format."""
    parsed_hrp = hrp_parse(hrp)
    if parsed_hrp is None:
        raise ValueError(f"Invalid human-readable part: {hrp!r}")
    data5 = convert_bits(data, 8, 5)
    if data5 is None:
        raise ValueError("Data conversion failed.")
    if len(parsed_hrp) + len(data5) + CHECKSUM_LENGTH > MAX_CODE_LENGTH:
        raise ValueError(f"Encoded string would exceed the maximum code length of {MAX_CODE_LENGTH}.")
    return bech32_encode(parsed_hrp, data5)


def convert_bits(data, from_bits, to_bits, pad=True):
    """Converts data between different bit lengths."""
    acc = 0
    bits = 0
    ret = []
    maxv = (1 << to_bits) - 1
    for value in data:
        if value < 0 or (value >> from_bits):
            return None
        acc = (acc << from_bits) | value
        bits += from_bits
        while bits >= to_bits:
            bits -= to_bits
            ret.append((acc >> bits) & maxv)
    if pad:
        if bits:
            ret.append((acc << (to_bits - bits)) & maxv)
    elif bits >= from_bits or ((acc << (to_bits - bits)) & maxv):
        return None
    return ret


def _split_and_verify(bechstr: str) -> Tuple[Optional[str], Optional[List[int]], Optional[int]]:
    """Parses a bech32 string and returns (hrp, 5-bit data with checksum, checksum constant)."""
    if ((any(ord(x) < 33 or ord(x) > 126 for x in bechstr)) or
            (bechstr.lower() != bechstr and bechstr.upper() != bechstr)):
        return None, None, None
    bechstr = bechstr.lower()
    pos = bechstr.rfind(SEPARATOR)
    if pos < 1 or pos + 1 + CHECKSUM_LENGTH > len(bechstr):
        return None, None, None
    hrp = hrp_parse(bechstr[:pos])
    if hrp is None:
        return None, None, None
    if len(bechstr) - 1 > MAX_CODE_LENGTH:
        return None, None, None
    if not all(x in CHARSET for x in bechstr[pos + 1:]):
        return None, None, None
    data = [CHARSET.find(x) for x in bechstr[pos + 1:]]
    const = polymod(bech32_hrp_expand(hrp) + data)
    if const not in (BECH32_CONST, BECH32M_CONST):
        return None, None, None
    return hrp, data, const


def bech32_variant(bechstr: str) -> Optional[str]:
    """Returns 'bech32m' or 'bech32' depending on the checksum constant, or None if invalid."""
    _, _, const = _split_and_verify(bechstr)
    if const == BECH32M_CONST:
        return "bech32m"
    if const == BECH32_CONST:
        return "bech32"
    return None


def bech32_decode(bechstr):
    """
    Decode a bech32m string.

    Strings carrying the legacy bech32 checksum are accepted as well; only the
    data is returned, so re-encoding always produces bech32m.

    :return: A tuple (hrp, data) with data as a list of byte values, or (None, None).
    """
    hrp, data, const = _split_and_verify(bechstr)
    if hrp is None:
        return None, None
    # Convert from 5-bit groups to 8-bit groups, ensuring no padding in the final byte array.
    decoded_data = convert_bits(data[:-CHECKSUM_LENGTH], 5, 8, False)
    if decoded_data is None:
        logger.debug(f"Invalid padding in data part of {bechstr!r}")
        return None, None
    return hrp, decoded_data
