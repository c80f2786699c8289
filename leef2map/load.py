#!/usr/bin/env python
# coding: utf-8


def load_from_script(fp):
    """Load external python script that gives a leef2map parser.
    The script should define a :class:`~leef2map.LeefParser`
    instance as module-level variable "parser".

    Args:
        fp (str): file path of external python script.

    Returns:
        :class:`~leef2map.LeefParser`
    """

    import os.path
    import sys
    from importlib import import_module
    from ._common import ParserDefinitionError
    path = os.path.dirname(fp)
    sys.path.append(os.path.abspath(path))
    libname = os.path.splitext(os.path.basename(fp))[0]
    script_mod = import_module(libname)

    if not hasattr(script_mod, "parser"):
        msg = "{0} does not define parser".format(fp)
        raise ParserDefinitionError(msg)
    return script_mod.parser


def load_from_config(fp):
    """Load leef2map parser from configparser text file.

    Available options in [general] section:

    * preserve_original (bool): add "rawEvent" item. Defaults to false.
    * tokenizers (comma-separated list): tokenizer names
      in order of test, chosen from "tab", "delimiter" and "whitespace".
      Defaults to all of them in this order.
    * fold_labels (bool): fold <name>Label items. Defaults to true.

    Args:
        fp (str): file path of configparser text file.

    Returns:
        :class:`~leef2map.LeefParser`
    """

    def _get_list(conf, section, option):
        # ignore line feed
        s = conf[section][option].replace('\r\n', '').replace('\n', '')
        return [r.strip() for r in s.split(',') if r.strip() != ""]

    def _get_bool(conf, section, option, default):
        if not conf.has_option(section, option):
            return default
        try:
            return conf.getboolean(section, option)
        except ValueError:
            msg = "invalid boolean for {0}: {1}".format(
                option, conf[section][option])
            raise GenericLeefError(msg)

    import configparser
    from ._common import LeefParser, GenericLeefError
    from .preset import default_tokenizers, tokenizers_by_name
    conf = configparser.ConfigParser()
    with open(fp) as f:
        conf.read_file(f)
    if not conf.has_section('general'):
        conf.add_section('general')

    preserve = _get_bool(conf, 'general', 'preserve_original', False)
    fold_labels = _get_bool(conf, 'general', 'fold_labels', True)
    if conf.has_option('general', 'tokenizers'):
        tokenizers = tokenizers_by_name(
            _get_list(conf, 'general', 'tokenizers'))
    else:
        tokenizers = default_tokenizers()

    if fold_labels:
        label_folder = None
    else:
        label_folder = False
    return LeefParser(preserve_original=preserve,
                      tokenizers=tokenizers,
                      label_folder=label_folder)
