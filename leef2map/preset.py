# coding: utf-8

"""leef2map.preset is a submodule to provide some settings
for frequently used LEEF sources."""


from ._common import LeefParser
from .attribute import *

TOKENIZERS = {"tab": TabTokenizer,
              "delimiter": DelimiterTokenizer,
              "whitespace": WhitespaceTokenizer}


def default_tokenizers():
    """Generate list of tokenizers with default settings.

    The tokenizers are tested in following order.

    #. :class:`~leef2map.attribute.TabTokenizer` if the attributes include tabs
    #. :class:`~leef2map.attribute.DelimiterTokenizer` if the header declares a delimiter
    #. :class:`~leef2map.attribute.WhitespaceTokenizer` otherwise

    Returns:
        list of tokenizers
    """
    return [TabTokenizer(),
            DelimiterTokenizer(),
            WhitespaceTokenizer()]


def tokenizers_by_name(names):
    """Generate list of tokenizers from their names
    (one of "tab", "delimiter" and "whitespace").

    Raises :class:`~leef2map.ParserDefinitionError` for unknown names.
    """
    from ._common import ParserDefinitionError
    ret = []
    for name in names:
        if name not in TOKENIZERS:
            msg = "tokenizer {0} not available".format(name)
            raise ParserDefinitionError(msg)
        ret.append(TOKENIZERS[name]())
    return ret


def default():
    """Generate :class:`~leef2map.LeefParser` of default settings.

    :func:`~leef2map.init_parser` generates same instance without any arguments.

    Returns:
        :class:`~leef2map.LeefParser`
    """
    return LeefParser(tokenizers=default_tokenizers())


def raw_event_parser():
    """Generate :class:`~leef2map.LeefParser` that always keeps
    the input line as "rawEvent" item.

    Returns:
        :class:`~leef2map.LeefParser`
    """
    return LeefParser(preserve_original=True,
                      tokenizers=default_tokenizers())
