#!/usr/bin/env python
# coding: utf-8

import os.path
import leef2map

if __name__ == "__main__":
    place = os.path.dirname(__file__) or "."
    parser = leef2map.init_parser(preserve_original=True)

    with open(os.path.join(place, "examples.txt")) as f:
        for i, mes in enumerate(f.read().strip().splitlines()):
            print("--- Example Line #{0} ---".format(i + 1))
            try:
                d = parser.process_line(mes)
            except leef2map.LeefParseFailure as e:
                print("-> {0}".format(e))
            else:
                for key, value in sorted(d.items()):
                    print("{0}: {1}".format(key, value))
            print()
