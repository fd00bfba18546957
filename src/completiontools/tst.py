class Node():
    __slots__ = ("symbol", "is_terminal", "lo", "eq", "hi")

    def __init__(self, symbol):
        self.symbol = symbol
        self.is_terminal = False

        self.lo = None
        self.eq = None
        self.hi = None

    def __repr__(self):
        return f"Node({self.symbol!r}, is_terminal={self.is_terminal})"


class TernarySearchTree():
    """Ternary search tree that stores sequences of comparable symbols
    and finds all stored sequences extending a given prefix.

    Symbols can be of any type with a consistent, transitive total order
    (== and <), e.g. the characters of a string or the words of a phrase.
    Wherever a sequence is expected, any finite iterable of symbols works,
    including a SymbolSequence, a string, a tuple or a generator.
    """

    def __init__(self):
        self._root = None
        self._total = 0

    def insert(self, sequence):
        """Insert sequence into Tree.

        Parameters
        ----------
        sequence : iterable
            Symbols to be inserted. Must not be empty.

        Raises
        ------
        ValueError
            If sequence does not contain any symbols.

        Notes
        -----
        Inserting a sequence that is already stored changes nothing.
        A sequence that so far only existed as prefix of longer
        sequences is simply marked as stored.
        """
        node = None

        for symbol in sequence:
            if self._root is None:
                self._root = node = Node(symbol)

            elif node is None:
                node = self._insert(symbol, self._root)

            # fresh position, nothing to compare against
            elif node.eq is None:
                node.eq = Node(symbol)
                node = node.eq

            else:
                node = self._insert(symbol, node.eq)

        if node is None:
            msg = "Cannot insert empty sequence!"
            raise ValueError(msg)

        if not node.is_terminal:
            node.is_terminal = True
            self._total += 1

    def contains(self, sequence):
        """Return whether sequence was inserted as a complete sequence.

        Parameters
        ----------
        sequence : iterable
            Symbols to look up.

        Returns
        -------
        bool
            False for sequences that only exist as prefix of longer ones.
        """
        node = self._search(tuple(sequence), self._root)
        return node is not None and node.is_terminal

    def has_prefix(self, prefix):
        """Return whether any stored sequence begins with prefix
        (including prefix itself).

        Notes
        -----
        The empty prefix always exists, even in an empty tree, matching
        prefix_query, which returns an empty list rather than None for it.
        """
        found, _ = self._completion_root(tuple(prefix))
        return found

    def prefix_query(self, prefix, as_string=False, join_char=""):
        """Return all stored sequences that are longer than and begin
        with prefix.

        Parameters
        ----------
        prefix : iterable
            Symbols that all results begin with.
        as_string : bool
            Join the symbols of each result into a single string.
        join_char : str
            String put between symbols if as_string is True.

        Returns
        -------
        list or None
            None if no stored sequence begins with prefix. Otherwise a
            (possibly empty) list of tuples of symbols, or of str if
            as_string is True, each starting with prefix.

        Notes
        -----
        Results are in tree order, not sorted. The prefix itself is never
        included, even if it was inserted. An empty prefix returns all
        stored sequences.
        """
        prefix = tuple(prefix)
        found, start = self._completion_root(prefix)

        if not found:
            return None

        return list(self._format(self._completions(start, prefix),
                                 as_string, join_char))

    def completions(self, prefix=(), as_string=False, join_char=""):
        """Generator yielding all stored sequences that are longer than
        and begin with prefix.

        Same as prefix_query, except that nothing is yielded if prefix
        does not exist in the tree. Results are produced lazily, so large
        subtrees can be cut short by the caller.
        """
        prefix = tuple(prefix)
        _, start = self._completion_root(prefix)

        yield from self._format(self._completions(start, prefix),
                                as_string, join_char)

    def _insert(self, symbol, node):
        """Return node for symbol among the siblings below node,
        creating it if it doesn't exist yet.
        """
        while True:
            if symbol == node.symbol:
                return node

            elif symbol < node.symbol:
                if node.lo is None:
                    node.lo = Node(symbol)
                    return node.lo
                node = node.lo

            else:
                if node.hi is None:
                    node.hi = Node(symbol)
                    return node.hi
                node = node.hi

    def _search(self, symbols, node):
        """Return node that symbols end in.
        """
        if not symbols:
            return None

        last = len(symbols) - 1
        idx = 0

        while node is not None:
            symbol = symbols[idx]

            if symbol == node.symbol:
                if idx == last:
                    return node
                idx += 1
                node = node.eq

            elif symbol < node.symbol:
                node = node.lo

            else:
                node = node.hi

        return None

    def _completion_root(self, prefix):
        """Return whether prefix exists and the node its
        completions start from.
        """
        if not prefix:
            return True, self._root

        prefix_node = self._search(prefix, self._root)

        if prefix_node is None:
            return False, None

        return True, prefix_node.eq

    def _completions(self, node, prefix):
        """Generator yielding stored sequences starting from node.

        Each node is reported before its lo, eq and hi subtrees (in
        that order). Siblings share a position, so only the eq branch
        extends the prefix.
        """
        if node is None:
            return

        stack = [(node, prefix)]

        while stack:
            node, prefix = stack.pop()
            extended = prefix + (node.symbol,)

            if node.is_terminal:
                yield extended

            # pushed in reverse, lo is visited first
            if node.hi is not None:
                stack.append((node.hi, prefix))
            if node.eq is not None:
                stack.append((node.eq, extended))
            if node.lo is not None:
                stack.append((node.lo, prefix))

    @staticmethod
    def _format(completions, as_string, join_char):
        for completion in completions:
            if as_string:
                completion = join_char.join(completion)
            yield completion

    def __contains__(self, sequence):
        """Adds "sequence in TST" syntactic sugar.
        """
        return self.contains(sequence)

    def __iter__(self):
        return self.completions()

    def __len__(self):
        return self._total

    @property
    def root(self):
        return self._root
