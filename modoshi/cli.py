"""
Command line interface for modoshi.

Usage:
    python -m modoshi.cli "食べさせない"
    python -m modoshi.cli -l en "looked it up"
    python -m modoshi.cli -j "食べた"          # JSON output
    python -m modoshi.cli -p "ﾀﾍﾞﾀ"            # run the language's text processors first
    python -m modoshi.cli --list-languages
"""

import argparse
import json
import logging
import sys
from typing import List, Optional, Tuple

from modoshi import __version__, settings
from modoshi.languages import get_language_descriptor, get_language_summaries
from modoshi.preprocessors import get_text_variants
from modoshi.transformer import LanguageTransformer, TransformedText

REASON_SEPARATOR = " « "


def _non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: '{value}'") from None
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be 0 or positive, got {number}")
    return number


def format_result(result: TransformedText) -> str:
    """One output line: the candidate, then its reasons."""
    if not result.trace:
        return result.text
    return REASON_SEPARATOR.join([result.text] + result.reasons)


def is_dictionary_candidate(result: TransformedText, part_of_speech_mask: int) -> bool:
    return not result.trace or (result.conditions & part_of_speech_mask) != 0


def list_languages() -> int:
    for summary in get_language_summaries():
        print(f"{summary.iso}\t{summary.iso639_3}\t{summary.name}\t{summary.example_text}")
    return 0


def main(args: Optional[list] = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description='Deinflect words back to their dictionary forms',
        prog='modoshi',
    )

    parser.add_argument(
        'text',
        nargs='*',
        help='Inflected text to deinflect',
    )

    parser.add_argument(
        '-l', '--language',
        type=str,
        default=settings.DEFAULT_LANGUAGE,
        metavar='LANG',
        help=f'Language code (default: {settings.DEFAULT_LANGUAGE})',
    )

    parser.add_argument(
        '-j', '--json',
        action='store_true',
        help='Print candidates as JSON',
    )

    parser.add_argument(
        '-a', '--all',
        action='store_true',
        help='Include intermediate candidates that are not dictionary forms',
    )

    parser.add_argument(
        '-n', '--max-results',
        type=_non_negative_int,
        default=None,
        metavar='N',
        help='Stop the search after N candidates (0 means unbounded)',
    )

    parser.add_argument(
        '-p', '--preprocess',
        action='store_true',
        help="Deinflect every variant produced by the language's text processors",
    )

    parser.add_argument(
        '--list-languages',
        action='store_true',
        help='List supported languages',
    )

    parser.add_argument(
        '--debug',
        action='store_true',
        help='Enable debug logging',
    )

    parser.add_argument(
        '-v', '--version',
        action='store_true',
        help='Show version information',
    )

    parsed = parser.parse_args(args)

    if parsed.version:
        print(f'modoshi {__version__}')
        return 0

    logging.basicConfig(
        level=logging.DEBUG if parsed.debug or settings.DEBUG else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
    )

    if parsed.list_languages:
        return list_languages()

    text = ' '.join(parsed.text) if parsed.text else ''

    if not text:
        parser.print_help()
        return 1

    descriptor = get_language_descriptor(parsed.language)
    if descriptor is None or descriptor.transforms is None:
        print(f"Error: unknown language '{parsed.language}'", file=sys.stderr)
        return 1

    transformer = LanguageTransformer(parsed.max_results)
    transformer.install(descriptor.transforms)
    pos_mask = transformer.get_condition_flags_from_parts_of_speech(
        list(transformer.part_of_speech_flags)
    )

    sources = [text]
    if parsed.preprocess:
        sources = get_text_variants(text, descriptor.preprocessors)

    candidates: List[Tuple[str, TransformedText]] = []
    for source in sources:
        for result in transformer.transform(source):
            if parsed.all or is_dictionary_candidate(result, pos_mask):
                candidates.append((source, result))

    if parsed.json:
        output = [dict(source=source, **result.to_dict()) for source, result in candidates]
        print(json.dumps(output, ensure_ascii=False))
    else:
        for _, result in candidates:
            print(format_result(result))

    return 0


if __name__ == '__main__':
    sys.exit(main())
