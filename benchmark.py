from typing import Dict
import timeit
from isal import isal_zlib
import isalbuf

import argparse
pangram = b"The quick brown fox jumps over the lazy dog. "
data = pangram * 23 * 1024  # Approx 1 MB
sizes: Dict[str, bytes] = {
    "0b": b"",
    "8b": data[:8],
    "128b": data[:128],
    "1kb": data[:1024],
    "8kb": data[:8 * 1024],
    "32kb": data[:32 * 1024],
    "128kb": data[:128*1024],
    "1mb": data,
}
compressed_sizes = {name: isal_zlib.compress(data_block)
                    for name, data_block in sizes.items()}


def show_attempts():
    # Number of buffers decompress tries before the output fits.
    print("name\tratio\tattempts")
    policy = isalbuf.DEFAULT_POLICY
    for name, compressed in compressed_sizes.items():
        out_size = len(sizes[name])
        guess = round(len(compressed) * policy.initial_factor)
        attempts = 1
        while guess <= out_size:
            guess = max(round(guess * policy.growth_factor), guess + 1)
            attempts += 1
        ratio = round(out_size / len(compressed), 1)
        print(f"{name}\t{ratio}\t{attempts}")


def benchmark(name: str,
              names_and_data: Dict[str, bytes],
              isalbuf_string: str,
              isal_string: str,
              number: int = 1_000):
    print(name)
    print("name\tisalbuf\tisal\tratio")
    for name, data_block in names_and_data.items():
        timeit_kwargs = dict(globals=dict(**globals(), **locals()),
                             number=number)
        isalbuf_time = timeit.timeit(isalbuf_string, **timeit_kwargs)
        isal_time = timeit.timeit(isal_string, **timeit_kwargs)
        isalbuf_microsecs = round(isalbuf_time * (1_000_000 / number), 2)
        isal_microsecs = round(isal_time * (1_000_000 / number), 2)
        ratio = round(isalbuf_time / isal_time, 2)
        print("{0}\t{1}\t{2}\t{3}".format(name,
                                          isalbuf_microsecs,
                                          isal_microsecs,
                                          ratio))


def argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser()
    parser.add_argument("--all", action="store_true")
    parser.add_argument("--checksums", action="store_true")
    parser.add_argument("--functions", action="store_true")
    parser.add_argument("--attempts", action="store_true")
    return parser

if __name__ == "__main__":
    args = argument_parser().parse_args()
    if args.attempts or args.all:
        show_attempts()
    if args.checksums or args.all:
        benchmark("CRC32", sizes,
                  "isalbuf.crc_checksum(data_block)",
                  "isal_zlib.crc32(data_block)")

        benchmark("Adler32", sizes,
                  "isalbuf.adler_like_checksum(data_block)",
                  "isal_zlib.adler32(data_block)")
    if args.functions or args.all:
        benchmark("Compression", sizes,
                  "isalbuf.compress(data_block, 1)",
                  "isal_zlib.compress(data_block, 1)")

        benchmark("Decompression", compressed_sizes,
                  "isalbuf.decompress(data_block)",
                  "isal_zlib.decompress(data_block)")
