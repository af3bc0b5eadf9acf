from ..core.signature import entry, sig

ENTRIES = (
    entry("application/x-executable", sig(b"\x7FELF", "elf")),
    entry("application/x-msdownload", sig(b"MZ", "exe")),      # DOS/PE stub
    entry(
        "application/x-mach-binary",
        sig(b"\xCF\xFA\xED\xFE", "macho"),     # 64-bit, little endian
        sig(b"\xCE\xFA\xED\xFE", "macho"),     # 32-bit, little endian
        sig(b"\xFE\xED\xFA\xCF", "macho"),     # 64-bit, big endian
        sig(b"\xFE\xED\xFA\xCE", "macho"),     # 32-bit, big endian
        sig(b"\xCA\xFE\xBA\xBE", "macho"),     # universal
    ),
    entry("application/vnd.android.package-archive", sig(b"PK\x03\x04", "apk")),
)
