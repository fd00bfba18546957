"""Line based autocompletion: reads one prefix per line from stdin
and prints all known words that complete it.
"""
import sys
import argparse

import requests

from .autocomplete import load_autocompleter


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="completiontools",
        description="Complete words from a word list.")
    parser.add_argument("source",
                        help="Path or URL of word list, one word per line.")
    parser.add_argument("--limit", type=int, default=None,
                        help="Maximum number of completions printed.")
    parser.add_argument("--sort", action="store_true",
                        help="Print completions in alphabetical order.")
    parser.add_argument("--lower", action="store_true",
                        help="Lowercase word list and queries.")
    parser.add_argument("--verbose", action="store_true",
                        help="Report progress while loading to stderr.")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)

    try:
        autocompleter = load_autocompleter(args.source,
                                           limit=args.limit,
                                           sort=args.sort,
                                           lower=args.lower,
                                           verbose=args.verbose,
                                           text_buffer=sys.stderr)
    except (OSError, UnicodeDecodeError,
            requests.RequestException) as error:
        print(f"Could not load word list '{args.source}': {error}",
              file=sys.stderr)
        return 1

    while True:
        try:
            word = input("Enter word: ")
        except (EOFError, KeyboardInterrupt):
            print()
            break

        autocompleter.set_query(word)
        suggestions = autocompleter.suggestions()

        if suggestions is None:
            print("No completions found.")
            continue

        # a word without completions prints nothing
        for suggestion in suggestions:
            print(suggestion)

    print("Thank you!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
