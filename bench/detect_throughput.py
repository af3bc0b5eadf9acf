"""Throughput sanity benchmark for detect().

Times the full table scan for a hit near the start, a hit near the end and
a miss. Not part of the test suite; meant for manual runs.
"""

import sys
import timeit
from pathlib import Path

# Add src to path for development
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from filesniff import detect, default_registry

CASES = {
    "jpeg (first entry)": b"\xFF\xD8\xFF\xE0" + b"\x00" * 4092,
    "otf (last entry)": b"OTTO" + b"\x00" * 4092,
    "no match": b"\x01" * 4096,
}


def main(number: int = 20000) -> None:
    print(f"{len(default_registry())} formats, {sum(1 for _ in default_registry())} signatures")
    for name, buf in CASES.items():
        seconds = timeit.timeit(lambda: detect(buf), number=number)
        print(f"{name:20s} {seconds / number * 1e6:8.2f} us/call -> {detect(buf)}")


if __name__ == "__main__":
    main()
