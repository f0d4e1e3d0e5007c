"""
Huffman-encode a text file

Reads a UTF-8 text file, writes its Huffman bit-string ('0'/'1' characters)
to encoded.huff and the decoded text back out to result.txt.

How to run:
  python huffman_file.py                  (prompts for the file name)
  python huffman_file.py source.txt --outdir out --quiet

Notes:
  The tree only lives in memory for the run, so encoded.huff cannot be
  decoded by a later run on its own.
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Callable, Optional, Tuple

import huffman as huff

PROMPT = "Insert file name you would like to encode with the file extension: "


def read_text(path: Path) -> str:
    return path.read_text(encoding="utf-8")

def encode_text(text: str) -> Tuple[huff.EncodedResult, str]:
    result = huff.compress(text.encode("utf-8"))
    decoded = huff.decompress(result).decode("utf-8")
    return result, decoded

def write_outputs(result: huff.EncodedResult, decoded: str, encoded_path: Path, result_path: Path) -> None:
    encoded_path.write_text(result.bits, encoding="utf-8")
    result_path.write_text(decoded, encoding="utf-8")


def prompt_for_text(path: Optional[str], max_attempts: int,
                    ask: Callable[[str], str] = input) -> Optional[Tuple[str, str]]:
    """
    Keep asking for a file until one reads as UTF-8
    Returns (path, text), or None once max_attempts (0 = unlimited) run out
    """
    attempts = 0
    while max_attempts == 0 or attempts < max_attempts:
        attempts += 1
        name = path if path is not None else ask(PROMPT).strip()
        path = None # only the first attempt uses the command line path
        try:
            return name, read_text(Path(name))
        except UnicodeDecodeError:
            print("Unsupported Encoding ... Must be UTF-8")
        except OSError:
            print("Error in Reading the File ... Maybe Wrong File Name ... Don't Forget to Add the File Extension")
        print("Try Again ... \n")
    return None


def main(argv=None, ask: Callable[[str], str] = input) -> int:
    ap = argparse.ArgumentParser()
    ap.add_argument("path", nargs="?", default=None, help="Text file to encode (prompted for if omitted)")
    ap.add_argument("--outdir", type=str, default=".", help="Directory for the encoded and decoded files")
    ap.add_argument("--encoded", type=str, default="encoded.huff", help="File name for the bit-string")
    ap.add_argument("--result", type=str, default="result.txt", help="File name for the decoded text")
    ap.add_argument("--max-attempts", type=int, default=0, help="Give up after this many bad file names (0 = never)")
    ap.add_argument("--quiet", action="store_true", help="Do not echo the text, encoding and decoding")
    args = ap.parse_args(argv)

    found = prompt_for_text(args.path, args.max_attempts, ask)
    if found is None:
        print("Giving up after", args.max_attempts, "attempts")
        return 1
    name, text = found

    result, decoded = encode_text(text)

    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)
    write_outputs(result, decoded, outdir / args.encoded, outdir / args.result)

    print(f"Note: Huffman encoded and decoded files written to {outdir.resolve()}")
    if not args.quiet:
        print()
        print(f"Original Text in {name}: {text}")
        print(f"Huffman Encoding: {result.bits}")
        print(f"Huffman Decoding: {decoded}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
