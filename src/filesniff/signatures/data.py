from ..core.signature import entry, sig

ENTRIES = (
    entry("application/x-sqlite3", sig(b"SQLite format 3\x00", "sqlite")),
    entry("application/vnd.microsoft.portable-executable", sig(b"MZ", "dll")),
    entry(
        "application/x-shockwave-flash",
        sig(b"CWS", "swf"),     # zlib compressed
        sig(b"FWS", "swf"),
    ),
)
