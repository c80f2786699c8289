#!/usr/bin/env python

# Sample parser script for "leef2map --parser example/custom_parser.py".
# Tab separated attributes only, without label folding.

from leef2map import LeefParser
from leef2map.attribute import *

parser = LeefParser(preserve_original=True,
                    tokenizers=[TabTokenizer(), DelimiterTokenizer()],
                    label_folder=False)
