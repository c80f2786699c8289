# coding: utf-8

"""Tokenizers for the event attribute part of LEEF messages.

The event attribute part is a sequence of ``key=value`` pairs.
LEEF 1.0 uses a tab as the separator of the pairs,
and LEEF 2.0 allows a custom delimiter declared in the header.
In practice, many devices just use white spaces.

A tokenizer has two methods: ``accept`` tests that the tokenizer
is applicable to the attribute text, and ``tokenize`` converts
the text into a dict. :class:`~leef2map.LeefParser` uses the first
tokenizer that accepts the text.
"""

import re
from abc import ABC, abstractmethod

_ESCAPE = "\\"
_LITERAL_TAB = "\\t"

_hex_delimiter_regex = re.compile(r"^(0x|x)(?P<code>[0-9a-fA-F]{1,4})$",
                                  re.IGNORECASE)


def split_with_escaped(s, ch):
    """Split a string on a character unless it is escaped by a backslash.

    Escape characters are kept in the result.
    A backslash escaped by another backslash does not escape the next one.

    Example:
        >>> split_with_escaped(r"a=b\\=c=d", "=")
        ['a', 'b\\\\=c', 'd']

    Args:
        s (str): String to split.
        ch (str): A separator character.

    Returns:
        list of str
    """
    ret = []
    offset = 0
    escaped = False
    for i, c in enumerate(s):
        if escaped:
            escaped = False
        elif c == _ESCAPE:
            escaped = True
        elif c == ch:
            ret.append(s[offset:i])
            offset = i + 1
    ret.append(s[offset:])
    return ret


def resolve_delimiter(delimiter):
    """Convert the delimiter field of a LEEF 2.0 header into a character.

    The delimiter is given as a single character (e.g., ``^``)
    or a hex code prefixed by ``x`` or ``0x`` (e.g., ``x5e``).

    Returns:
        str or None: None if the value is not a valid delimiter.
    """
    if delimiter is None or delimiter == "":
        return None
    if len(delimiter) == 1:
        return delimiter
    mo = _hex_delimiter_regex.match(delimiter)
    if mo:
        return chr(int(mo.group("code"), 16))
    return None


class _TokenizerBase(ABC):

    @abstractmethod
    def accept(self, text, delimiter=None):
        raise NotImplementedError

    @abstractmethod
    def tokenize(self, text, delimiter=None):
        raise NotImplementedError

    @staticmethod
    def _pairs(tokens):
        # first "=" separates key and value; tokens without "=" are ignored
        d = {}
        for token in tokens:
            key, sep, value = token.partition("=")
            if sep:
                d[key] = value
        return d


class TabTokenizer(_TokenizerBase):
    """Tokenizer for attributes separated by tabs.

    Both real tab characters and the two-character sequence ``\\t``
    are accepted. Real tabs are preferred if both appear.

    Example:
        >>> TabTokenizer().tokenize("src=127.0.0.1\\tsuser=Admin")
        {'src': '127.0.0.1', 'suser': 'Admin'}
    """

    def accept(self, text, delimiter=None):
        return "\t" in text or _LITERAL_TAB in text

    def tokenize(self, text, delimiter=None):
        tokens = text.split("\t")
        if len(tokens) <= 1:
            tokens = text.split(_LITERAL_TAB)
        return self._pairs(tokens)


class DelimiterTokenizer(_TokenizerBase):
    """Tokenizer for attributes separated by the delimiter
    declared in the LEEF 2.0 header.

    Example:
        >>> DelimiterTokenizer().tokenize("src=127.0.0.1^suser=Admin", "x5e")
        {'src': '127.0.0.1', 'suser': 'Admin'}
    """

    def accept(self, text, delimiter=None):
        return resolve_delimiter(delimiter) is not None

    def tokenize(self, text, delimiter=None):
        sep = resolve_delimiter(delimiter)
        return self._pairs(text.split(sep))


class WhitespaceTokenizer(_TokenizerBase):
    """Tokenizer for attributes separated by white spaces.

    Values can include white spaces, so the text is split
    on unescaped ``=`` instead. In each split segment,
    the last word is the key of the next pair.

    Example:
        >>> WhitespaceTokenizer().tokenize("src=127.0.0.1 msg=user logged in")
        {'src': '127.0.0.1', 'msg': 'user logged in'}
    """

    def accept(self, text, delimiter=None):
        return True

    def tokenize(self, text, delimiter=None):
        segments = split_with_escaped(text.strip(), "=")
        d = {}
        key = ""
        for former, latter in zip(segments, segments[1:]):
            key = former.split(" ")[-1]
            d[key] = " ".join(latter.split(" ")[:-1])
        if key != "":
            d[key] = segments[-1]
        return d


class LabelFolder:
    """Fold custom labeled attributes into one item.

    LEEF uses ``<name>Label`` attributes to give a readable name
    to the value of ``<name>``, e.g., ``cs1Label=Reason Code cs1=404``.
    LabelFolder replaces such a pair with one item
    named by the label (spaces removed), i.e., ``ReasonCode=404``.

    Args:
        suffix (str, optional): suffix of label attributes.
    """

    def __init__(self, suffix="Label"):
        self._suffix = suffix

    def fold(self, attributes, verbose=False):
        """Fold labeled pairs.

        Args:
            attributes (dict): tokenized attributes.
            verbose (bool, optional): Show folded labels.

        Returns:
            dict: new dict with folded items.
        """
        d = dict(attributes)
        n = len(self._suffix)
        stems = [key[:-n] for key in attributes
                 if key.endswith(self._suffix) and key[:-n] in attributes]
        for stem in stems:
            if stem + self._suffix not in d or stem not in d:
                # already consumed by another pair (e.g. xLabelLabel)
                continue
            label = d.pop(stem + self._suffix)
            value = d.pop(stem)
            name = label.replace(" ", "")
            if verbose:
                print("label: {0} -> {1}".format(stem, name))
            d[name] = value
        return d
