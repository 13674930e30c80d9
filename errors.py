# errors.py
# Failures raised while loading word lists, dictionaries and searching.


class WordLadderError(Exception):
    """Base class for every failure the solver reports."""


class InvalidEncoding(WordLadderError):
    def __init__(self, word):
        self.word = word
        super().__init__(f"'{word}' contains characters outside the alphabet")


class InconsistentLength(WordLadderError):
    def __init__(self, word, expected):
        self.word = word
        self.expected = expected
        super().__init__(
            f"'{word}' has length {len(word)}, expected {expected} like the first word"
        )


class EmptySet(WordLadderError):
    def __init__(self, source="input"):
        self.source = source
        super().__init__(f"no words found in {source}")


class WordNotFound(WordLadderError):
    """One or more query words are missing from the graph.

    ``words`` lists every missing word, start word first.
    """

    def __init__(self, words):
        self.words = tuple(words)
        super().__init__(", ".join(f"'{w}' is not in the dictionary" for w in self.words))

    @property
    def word(self):
        return self.words[0]


class MalformedLine(WordLadderError):
    def __init__(self, lineno, line, reason="empty line"):
        self.lineno = lineno
        self.line = line
        self.reason = reason
        super().__init__(f"malformed dictionary line {lineno}: {reason}")
