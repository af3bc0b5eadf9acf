from ..core.signature import entry, sig

ENTRIES = (
    entry("application/font-woff", sig(b"wOFF\x00\x01\x00\x00", "woff")),
    entry("application/font-woff2", sig(b"wOF2\x00\x01\x00\x00", "woff2")),
    entry("application/vnd.ms-fontobject", sig(b"\x00\x00\x01\x00", "eot")),
    entry(
        "application/font-sfnt",
        sig(b"\x00\x01\x00\x00", "ttf"),
        sig(b"OTTO", "otf"),
    ),
)
