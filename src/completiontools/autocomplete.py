from itertools import islice

from .sequence import SymbolSequence
from .tst import TernarySearchTree
from .completiontools import load_words, sort_completions

# status of a query
EMPTY = "empty"
MISSING = "missing"
COMPLETE = "complete"
PARTIAL = "partial"


class Autocompleter():
    """Word completion for a query that is typed symbol by symbol.
    Uses a ternary search tree to look up completions.

    Attributes
    ----------
    tree : TernarySearchTree
        Tree holding all known words.
    query : SymbolSequence
        What has been typed so far.
    limit : int
        If provided, at most this many suggestions are returned.
    sort : bool
        If True, suggestions are sorted alphabetically, otherwise
        they are returned in tree order.
    lower : bool
        If True, typed symbols are lowercased.
    """

    def __init__(self, tree=None, limit=None, sort=False, lower=False):
        """
        Parameters
        ----------
        tree : TernarySearchTree
            Tree holding all known words. Empty tree if not provided.
        limit : int
            If provided, at most this many suggestions are returned.
        sort : bool
            If True, suggestions are sorted alphabetically.
        lower : bool
            If True, typed symbols are lowercased.

        Notes
        -----
        With sort=True all completions have to be collected before the
        first limit of them can be returned. Unsorted suggestions stop
        walking the tree as soon as limit is reached.
        """
        if tree is None:
            tree = TernarySearchTree()

        self._tree = tree
        self._query = SymbolSequence("")
        self._limit = limit
        self._sort = sort
        self._lower = lower

    def append(self, symbols):
        """Add typed symbol(s) to the end of the query.
        """
        # some characters lowercase to more than one
        if self.lower:
            symbols = symbols.lower()

        for symbol in symbols:
            self._query.append(symbol)

    def backspace(self):
        """Remove the last symbol of the query, if there is one.
        """
        self._query.drop_last()

    def clear(self):
        self._query = SymbolSequence("")

    def set_query(self, text):
        self.clear()
        self.append(text)

    def suggestions(self):
        """Return completions for the current query.

        Returns
        -------
        list of str or None
            None if no known word begins with the query. Otherwise the
            words that are longer than the query and begin with it, which
            is an empty list if the query is a word without completions.
            An empty query has no suggestions.
        """
        if not len(self._query):
            return []

        if not self._tree.has_prefix(self._query):
            return None

        completions = self._tree.completions(self._query, as_string=True)

        if self.sort:
            completions = sort_completions(completions)

        if self.limit is not None:
            completions = islice(completions, self.limit)

        return list(completions)

    def best(self):
        """Return first suggestion or None if there is none.
        """
        suggestions = self.suggestions()
        if suggestions:
            return suggestions[0]

        return None

    def status(self):
        """Classify current query.

        Returns
        -------
        str
            EMPTY if nothing has been typed, MISSING if no word begins
            with the query, COMPLETE if the query is a word that no
            longer word begins with and PARTIAL otherwise.
        """
        if not len(self._query):
            return EMPTY

        if not self._tree.has_prefix(self._query):
            return MISSING

        completions = self._tree.completions(self._query)
        if next(completions, None) is None:
            return COMPLETE

        return PARTIAL

    def is_word(self):
        return self._query in self._tree

    def insert(self, word):
        self._tree.insert(word)

    def train(self, words):
        """Insert all words.

        Parameters
        ----------
        words : iterable of str
            Words to insert. Must not be empty.
        """
        for word in words:
            self.insert(word)

    def __contains__(self, word):
        return word in self._tree

    def __len__(self):
        return len(self._tree)

    @property
    def tree(self):
        return self._tree

    @property
    def query(self):
        return self._query

    @property
    def limit(self):
        return self._limit

    @property
    def sort(self):
        return self._sort

    @property
    def lower(self):
        return self._lower


def load_autocompleter(source, limit=None, sort=False, lower=False,
                       **kwargs):
    """Convenience function to create an autocompleter from a word list.

    Notes
    -----
    Other keyword arguments are passed on to load_words.
    """
    tree = load_words(source, lower=lower, **kwargs)
    autocompleter = Autocompleter(tree,
                                  limit=limit,
                                  sort=sort,
                                  lower=lower)
    return autocompleter
