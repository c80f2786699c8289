import unittest

from leef2map.attribute import *


class TestAttribute(unittest.TestCase):

    def test_split_with_escaped(self):
        assert split_with_escaped(r"a=b\=c=d", "=") == ["a", r"b\=c", "d"]
        assert split_with_escaped(r"a\\=b", "=") == [r"a\\", "b"]
        assert split_with_escaped("abc", "=") == ["abc"]
        assert split_with_escaped("=", "=") == ["", ""]

    def test_resolve_delimiter(self):
        assert resolve_delimiter("^") == "^"
        assert resolve_delimiter("x5e") == "^"
        assert resolve_delimiter("0x5E") == "^"
        assert resolve_delimiter("x09") == "\t"
        assert resolve_delimiter("") is None
        assert resolve_delimiter(None) is None
        assert resolve_delimiter("User Signed In") is None

    def test_tab(self):
        tok = TabTokenizer()
        text = "src=192.0.2.0\tdst=172.50.123.1\tsev=5"
        assert tok.accept(text)
        assert tok.tokenize(text) == {"src": "192.0.2.0",
                                      "dst": "172.50.123.1",
                                      "sev": "5"}

        text = "src=192.0.2.0\\tdst=172.50.123.1\\turl=/a?b=c"
        assert tok.accept(text)
        assert tok.tokenize(text) == {"src": "192.0.2.0",
                                      "dst": "172.50.123.1",
                                      "url": "/a?b=c"}

        assert not tok.accept("src=192.0.2.0 dst=172.50.123.1")

    def test_tab_without_value(self):
        tok = TabTokenizer()
        assert tok.tokenize("src=192.0.2.0\tbroken\t") == {"src": "192.0.2.0"}

    def test_delimiter(self):
        tok = DelimiterTokenizer()
        text = "src=10.0.1.8^dst=10.0.0.5^msg=port scan"
        assert not tok.accept(text)
        assert tok.accept(text, "^")
        assert tok.tokenize(text, "x5e") == {"src": "10.0.1.8",
                                             "dst": "10.0.0.5",
                                             "msg": "port scan"}
        assert not tok.accept(text, "User Signed In")

    def test_whitespace(self):
        tok = WhitespaceTokenizer()
        d = tok.tokenize("src=127.0.0.1 suser=Admin ")
        assert d == {"src": "127.0.0.1", "suser": "Admin"}

        d = tok.tokenize("msg=user logged in src=127.0.0.1")
        assert d == {"msg": "user logged in", "src": "127.0.0.1"}

        d = tok.tokenize(r"request=https://google.com&search\=rust")
        assert d == {"request": r"https://google.com&search\=rust"}

        assert tok.tokenize("no pairs here") == {}

    def test_whitespace_overwrite(self):
        tok = WhitespaceTokenizer()
        d = tok.tokenize("src=1.1.1.1 src=2.2.2.2")
        assert d == {"src": "2.2.2.2"}

    def test_label_folder(self):
        folder = LabelFolder()
        d = folder.fold({"cat": "Policy",
                         "cs1Label": "Reason Code",
                         "cs1": "404",
                         "cs2Label": "Orphan"})
        assert d == {"cat": "Policy", "ReasonCode": "404", "cs2Label": "Orphan"}

    def test_label_folder_keeps_input(self):
        folder = LabelFolder()
        attrs = {"cs1Label": "Code", "cs1": "1"}
        folder.fold(attrs)
        assert attrs == {"cs1Label": "Code", "cs1": "1"}
