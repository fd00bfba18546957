import io
import os
import re
import sys
import random
import warnings

import psutil
import requests

from .tst import TernarySearchTree

ENGLISH_LOWER = "abcdefghijklmnopqrstuvwxyz"
ENGLISH_UPPER = ENGLISH_LOWER.upper()
ENGLISH = ENGLISH_LOWER + ENGLISH_UPPER

URL_SCHEMES = ("http://", "https://")


def extract_words(lines,
                  lower=False,
                  strip=True,
                  symbols=None,
                  skip_comments=None
                  ):
    """Generator that filters lines of a word list and yields the words.

    Parameters
    ----------
    lines : iterable of str
        Word list, one word per line, typically an opened file
    lower : bool
        Treat all characters as lowercase
    strip : bool
        Remove surrounding whitespace, otherwise only the line break
        is removed
    symbols : str
        If provided, words containing characters other than these are
        dropped and a warning is issued.
    skip_comments : str
        If provided, lines starting with this string are dropped.

    Yields
    -------
    str
        Each word in order. Empty lines are skipped silently.
    """
    if symbols:
        disallowed_characters = re.compile(f"[^{re.escape(symbols)}]")

    for idx, line_ in enumerate(lines):

        line = line_.rstrip("\r\n")

        if strip:
            line = line.strip()

        if lower:
            line = line.lower()

        if not line:
            continue

        if skip_comments and line.startswith(skip_comments):
            continue

        if symbols and disallowed_characters.search(line):
            msg = f"Line ({idx}) contains disallowed characters " \
                  f"and is skipped: {line!r}"
            warnings.warn(msg)
            continue

        yield line


def read_lines(source, encoding="utf-8", timeout=30):
    """Generator that yields the lines of a word list.

    Parameters
    ----------
    source : str, path or iterable of str
        URL (http or https), path to a local file or an already opened
        stream of lines
    encoding : str
        Encoding used to decode the file or download
    timeout : float
        Seconds to wait for the server if source is a URL

    Yields
    ------
    str
        Each line, including its line break as when reading a file.

    Notes
    -----
    Nothing is read before the first line is requested, so a missing
    file (OSError) or failed download (requests.HTTPError) only surfaces
    once iteration starts.
    """
    if isinstance(source, str) and source.startswith(URL_SCHEMES):
        response = requests.get(source, timeout=timeout)
        response.raise_for_status()
        response.encoding = encoding
        yield from io.StringIO(response.text)

    elif isinstance(source, (str, os.PathLike)):
        with open(source, encoding=encoding) as lines:
            yield from lines

    else:
        yield from source


def build_tree(words, tree=None):
    """Insert words into a ternary search tree.

    Parameters
    ----------
    words : iterable
        Sequences to insert, typically str
    tree : TernarySearchTree
        Tree to insert into. A new tree is created if not provided.

    Returns
    -------
    TernarySearchTree
    """
    if tree is None:
        tree = TernarySearchTree()

    for idx, word in enumerate(words):
        if not word:
            msg = f"Word ({idx}) is empty and cannot be inserted!"
            warnings.warn(msg)
            continue

        tree.insert(word)

    return tree


def load_words(source, tree=None,
               verbose=False, every_n=1000, text_buffer=None,
               encoding="utf-8", timeout=30,
               **kwargs):
    """Read word list from source and insert all words into a tree.

    Parameters
    ----------
    source : str, path or iterable of str
        Word list location, see read_lines
    tree : TernarySearchTree
        Tree to insert into. A new tree is created if not provided.
    verbose : bool
        Report progress to text_buffer while loading
    every_n : int
        Report progress every every_n words
    text_buffer : buffer
        Progress is written here, defaults to sys.stdout
    encoding : str
        Encoding of file or download
    timeout : float
        Seconds to wait for the server if source is a URL

    Returns
    -------
    TernarySearchTree

    Notes
    -----
    Other keyword arguments are passed on to extract_words.
    """
    lines = read_lines(source, encoding=encoding, timeout=timeout)
    words = extract_words(lines, **kwargs)

    if verbose:
        words = verbose_generator(words, every_n=every_n,
                                  text_buffer=text_buffer)

    return build_tree(words, tree)


def sort_completions(completions):
    """Return completions sorted by value.

    Trees return completions in tree order, which is not lexicographic.
    """
    return sorted(completions)


def random_strings(num_strings, symbols=ENGLISH,
                   min_len=1, max_len=15, seed=None):
    rng = random.Random(seed)

    for i in range(num_strings):
        length = rng.choice(range(min_len, max_len))
        yield random_string(length=length, symbols=symbols, rng=rng)


def random_string(length, symbols=ENGLISH, seed=None, rng=None):
    if rng is None:
        rng = random.Random(seed)

    return "".join(rng.choices(symbols, k=length))


def verbose_generator(sequence,
                      every_n=1000, total="?", template=None,
                      text_buffer=None):
    """Yields elements from sequence, counts them and writes progress.

    Parameters
    ----------
    sequence : iterable
        Generator to add verbosity to
    every_n : int
        Write progress to text_buffer every every_n elements
    total : int
        Total number of elements, if known
    template : str
        Template for the verbose message
    text_buffer : buffer
        Reports will be written by calling text_buffer.write() method,
        defaults to sys.stdout

    Notes
    -----
    Template will be formatted with .format(), injecting:
        total - provided
        count - number of elements consumed so far
        memory - total memory usage of process using generator
    """
    if not template:
        template = "\rLoaded {count} out of {total} words ({memory:.1f} MB)."

    if text_buffer is None:
        text_buffer = sys.stdout

    text_buffer.write("\n")
    count = 0

    for element in sequence:
        yield element
        count += 1

        if not count % every_n:
            msg = template.format(count=count, total=total,
                                  memory=memory_usage())
            text_buffer.write(msg)
            text_buffer.flush()

    msg = template.format(count=count, total=total,
                          memory=memory_usage())
    text_buffer.write(msg)
    text_buffer.write("\n")
    text_buffer.flush()


def memory_usage():
    """Returns total memory usage of current process in MB.
    """
    pid = os.getpid()
    p = psutil.Process(pid)
    memory = p.memory_full_info().uss / 1024 / 1024
    return memory
