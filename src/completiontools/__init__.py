from .sequence import SymbolSequence
from .tst import Node, TernarySearchTree
from .completiontools import (ENGLISH, ENGLISH_LOWER, ENGLISH_UPPER,
                              build_tree, extract_words, load_words,
                              memory_usage, random_string, random_strings,
                              read_lines, sort_completions,
                              verbose_generator)
from .autocomplete import (Autocompleter, load_autocompleter,
                           EMPTY, MISSING, COMPLETE, PARTIAL)

__version__ = "0.1.0"
