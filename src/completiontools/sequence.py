class SymbolSequence():
    """Read-only iterable view over a sequence of comparable symbols,
    e.g. the characters of a word.

    Iterating the view always starts over from the first symbol, so the
    same view can be walked any number of times. The wrapped value can be
    grown or shrunk at its end, which is how a query is built up
    keystroke by keystroke.
    """
    __slots__ = ("_symbols",)

    def __init__(self, symbols=""):
        """
        Parameters
        ----------
        symbols : str or iterable
            Symbols to wrap. Strings are kept as they are, any other
            (finite) iterable is materialised into a tuple. The default
            is an empty textual sequence; pass an empty tuple for an empty
            sequence of other symbols.
        """
        if isinstance(symbols, SymbolSequence):
            symbols = symbols.value

        if not isinstance(symbols, str):
            symbols = tuple(symbols)

        self._symbols = symbols

    def append(self, symbol):
        """Add symbol to the end of the sequence.

        Parameters
        ----------
        symbol : object
            Symbol to add. Textual sequences take a single character.

        Raises
        ------
        TypeError
            If the sequence is textual and symbol is not a string.
        ValueError
            If the sequence is textual and symbol is not one character.
        """
        if isinstance(self._symbols, str):
            if not isinstance(symbol, str):
                msg = f"Textual sequence needs a character, got {symbol!r}!"
                raise TypeError(msg)
            if len(symbol) != 1:
                msg = f"Textual sequence takes one character at a time, " \
                      f"got {symbol!r}!"
                raise ValueError(msg)
            self._symbols += symbol
        else:
            self._symbols += (symbol,)

    def drop_last(self):
        """Remove the last symbol. Does nothing if the sequence is empty.
        """
        self._symbols = self._symbols[:-1]

    @property
    def value(self):
        return self._symbols

    def __iter__(self):
        return iter(self._symbols)

    def __len__(self):
        return len(self._symbols)

    def __eq__(self, other):
        if isinstance(other, SymbolSequence):
            return self._symbols == other._symbols
        return NotImplemented

    # mutable
    __hash__ = None

    def __str__(self):
        if isinstance(self._symbols, str):
            return self._symbols
        return "".join(str(symbol) for symbol in self._symbols)

    def __repr__(self):
        return f"SymbolSequence({self._symbols!r})"
