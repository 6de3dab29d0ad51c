#!/usr/bin/env python3
import argparse
import json
import sys

from zhengyu.converter import ZhengyuConverter
from zhengyu.dictionary import init_dictionary
from zhengyu.logger import logger
from zhengyu.nlp import PRESERVE_SOURCES, ZhengyuError, get_preserve_source

OUTPUTS = ("text", "annotated", "kana", "jyutping", "json")

def render(result, output: str) -> str:
    if output == "annotated":
        return result.annotated_text
    if output == "kana":
        return result.kana
    if output == "jyutping":
        return result.jyutping
    if output == "json":
        return json.dumps(result.model_dump(mode="json"), ensure_ascii=False, indent=2)
    return result.text

def main():
    parser = argparse.ArgumentParser(
        description="Convert Chinese text to Zhengyu (Cantonese written in kana)"
    )
    parser.add_argument(
        "text",
        nargs="?",
        help="Text to convert (read from stdin when omitted)"
    )
    parser.add_argument(
        "--mode",
        choices=["hybrid", "phonetic", "text"],
        default="hybrid",
        help="Conversion engine (default: hybrid)"
    )
    parser.add_argument(
        "--source",
        choices=[s for s in PRESERVE_SOURCES if s != "tagger"],
        default=None,
        help="Preserved-term source for hybrid mode (default: $ZHENGYU_PRESERVE_SOURCE or lexicon)"
    )
    parser.add_argument(
        "--dictionary",
        default=None,
        help="Path to the LSHK jyutping table, or 'pycantonese'"
    )
    parser.add_argument(
        "--output",
        choices=OUTPUTS,
        default="text",
        help="What to print (default: text)"
    )
    args = parser.parse_args()

    text = args.text if args.text is not None else sys.stdin.read()

    try:
        # only the hybrid engine consults a preserve source
        use_source = args.mode == "hybrid" and args.source
        preserve_source = get_preserve_source(args.source) if use_source else None
        converter = ZhengyuConverter(preserve_source=preserve_source)
        if args.mode == "text":
            result = converter.convert_text(text)
        else:
            init_dictionary(args.dictionary)
            if args.mode == "phonetic":
                result = converter.convert_phonetic(text)
            else:
                result = converter.convert(text)
    except ZhengyuError as e:
        logger.error(str(e))
        sys.exit(1)

    if result.source_error:
        logger.warning(f"Preserved-term extraction failed, output is fully phonetic: {result.source_error}")
    print(render(result, args.output))

if __name__ == "__main__":
    main()
