"""Checksums, block hashes and the ARC4 cipher used by Inno Setup installers."""

__version__ = "0.1.0"

__all__ = [
    "adler32",
    "arc4",
    "checksum",
    "crc32",
    "iteratedhash",
    "md5",
    "sha1",
    "sha256",
]