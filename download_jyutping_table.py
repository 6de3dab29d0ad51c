#!/usr/bin/env python3
import os
import argparse
import requests

from zhengyu import JYUTPING_TABLE_PATH, JYUTPING_TABLE_URL
from zhengyu.dictionary import LshkTableParser, JyutpingDictionary

def download_table(url: str, output_path: str, timeout: int = 60) -> int:
    """
    Download the LSHK jyutping table and return the number of characters it covers.

    :param url: Location of the TSV table.
    :param output_path: Where the TSV will be saved.
    """
    response = requests.get(url, timeout=timeout)
    response.raise_for_status()
    if not response.text:
        raise ValueError("Dictionary response body is empty")

    lines = response.text.splitlines()
    dictionary = JyutpingDictionary.from_entries(LshkTableParser.parse_lines(lines))
    if len(dictionary) == 0:
        raise ValueError("Dictionary is empty after parsing")

    os.makedirs(os.path.dirname(os.path.abspath(output_path)), exist_ok=True)
    with open(output_path, "w", encoding="utf-8") as f:
        f.write(response.text)
    return len(dictionary)

def main():
    parser = argparse.ArgumentParser(
        description="Download the LSHK Cantonese-Jyutping character table"
    )
    parser.add_argument(
        "--url",
        default=JYUTPING_TABLE_URL,
        help="Source URL of the TSV table"
    )
    parser.add_argument(
        "--output",
        default=JYUTPING_TABLE_PATH,
        help="Where to save the table"
    )
    args = parser.parse_args()

    print(f"Downloading Jyutping table from {args.url}...")
    count = download_table(args.url, args.output)
    print(f"✅ Saved {count} characters to: {args.output}")

if __name__ == "__main__":
    main()
