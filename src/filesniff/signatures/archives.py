from ..core.signature import entry, sig

ENTRIES = (
    entry("application/x-bzip2", sig(b"BZh", "bz2")),
    entry("application/x-lzip", sig(b"LZIP", "lz")),
    entry("application/x-lzma", sig(b"\x5D\x00\x00", "lzma")),
    entry("application/x-xz", sig(b"\xFD7zXZ\x00", "xz")),
    entry("application/x-compress", sig(b"\x1F\x9D", "Z")),
    entry("application/vnd.debian.binary-package", sig(b"!<arch>", "deb")),
    entry("application/x-rpm", sig(b"\xED\xAB\xEE\xDB", "rpm")),
)
