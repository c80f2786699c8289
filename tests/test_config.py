import os
import tempfile
import unittest

import leef2map

_LINE = "LEEF:2.0|Lancope|StealthWatch|1.0|41|cs1Label=Code cs1=404"


class TestConfig(unittest.TestCase):

    def _write_config(self, dirname, body):
        fp = os.path.join(dirname, "leef2map.conf")
        with open(fp, "w") as f:
            f.write(body)
        return fp

    def test_sample_config(self):
        place = os.path.dirname(__file__) or "."
        place += "/../example/sample.conf"
        parser = leef2map.load_from_config(place)
        d = parser.process_line(_LINE)
        assert d["rawEvent"] == _LINE
        assert d["Code"] == "404"

    def test_options(self):
        with tempfile.TemporaryDirectory() as dirname:
            fp = self._write_config(dirname, "\n".join([
                "[general]",
                "preserve_original = false",
                "tokenizers = tab,",
                "    whitespace",
                "fold_labels = no",
            ]))
            parser = leef2map.load_from_config(fp)

        assert [t.__class__.__name__ for t in parser.tokenizers] == [
            "TabTokenizer", "WhitespaceTokenizer"]
        d = parser.process_line(_LINE)
        assert "rawEvent" not in d
        assert d["cs1Label"] == "Code"

    def test_empty_config(self):
        with tempfile.TemporaryDirectory() as dirname:
            fp = self._write_config(dirname, "")
            parser = leef2map.load_from_config(fp)
        assert parser.preserve_original is False
        assert len(parser.tokenizers) == 3
        assert parser.process_line(_LINE)["Code"] == "404"

    def test_invalid_config(self):
        with tempfile.TemporaryDirectory() as dirname:
            fp = self._write_config(dirname,
                                    "[general]\ntokenizers = tab, comma\n")
            with self.assertRaises(leef2map.ParserDefinitionError):
                leef2map.load_from_config(fp)

            fp = self._write_config(dirname,
                                    "[general]\npreserve_original = maybe\n")
            with self.assertRaises(leef2map.GenericLeefError):
                leef2map.load_from_config(fp)

    def test_script(self):
        place = os.path.dirname(__file__) or "."
        place += "/../example/custom_parser.py"
        parser = leef2map.load_from_script(place)
        d = parser.process_line("LEEF:1.0|V|P|1.0|E|cs1Label=Code\tcs1=404")
        assert d["cs1Label"] == "Code"
        assert d["rawEvent"].startswith("LEEF:1.0")
