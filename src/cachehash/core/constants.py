"""
Key hashing constants: FNV parameters, bit masks and reference vectors.
"""
import struct

# 64-bit FNV-1 parameters
FNV1_64_INIT = 0xCBF29CE484222325
FNV_64_PRIME = 0x100000001B3

# Masks
MASK_32 = 0xFFFFFFFF
MASK_64 = 0xFFFFFFFFFFFFFFFF
SIGN_BIT_64 = 1 << 63
SIGNED_MIN_64 = -(1 << 63)

# CRC32 post-processing: (crc >> 16) & 0x7fff, as used by the perl client
CRC32_SHIFT = 16
CRC32_MASK = 0x7FFF

# Ketama point: first 4 digest bytes, little-endian
KETAMA_POINT_STRUCT = struct.Struct("<I")

# Key encodings
KEY_ENCODING = "utf-8"
UTF16_UNIT_ENCODING = "utf-16-le"

# Startup self-check: probe key -> expected normalized value
VERIFY_PROBE_KEY = ""
REFERENCE_VECTORS = {
    "crc32": 0,  # crc32(b"") == 0
    "fnv1_64": 0x340D631B7BDDDCDB,  # abs of the offset basis read as signed
    "ketama_md5": 0xD98C1DD4,  # md5("") = d41d8cd9...
}
