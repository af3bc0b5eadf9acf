from ..core.signature import Condition, entry, sig

_ANY4 = (None,) * 4

ENTRIES = (
    entry(
        "audio/mpeg",
        sig(b"ID3", "mp3"),                                     # ID3v2 tag
        sig([0xFF, None], "mp3", Condition.MPEG_FRAME_SYNC),    # bare frame
    ),
    entry("audio/wav", sig([*b"RIFF", *_ANY4, *b"WAVE"], "wav")),
    entry("audio/flac", sig(b"fLaC", "flac")),
    entry("audio/ogg", sig(b"OggS", "ogg")),
    entry("audio/webm", sig(b"\x1A\x45\xDF\xA3", "weba")),
    entry(
        "audio/aac",
        sig(b"\xFF\xF1", "aac"),    # ADTS, MPEG-4
        sig(b"\xFF\xF9", "aac"),    # ADTS, MPEG-2
    ),
    entry("audio/midi", sig(b"MThd", "midi")),
    entry("audio/x-m4a", sig([*_ANY4, *b"ftypM4A "], "m4a")),
    entry("audio/amr", sig(b"#!AMR", "amr")),
    entry("audio/aiff", sig([*b"FORM", *_ANY4, *b"AIFF"], "aiff")),
)
