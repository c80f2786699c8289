# coding: utf-8

# keys in public
KEY_AHOST = "ahost"
KEY_AT = "at"
KEY_SYSLOG_FACILITY = "syslog_facility"
KEY_SYSLOG_PRIORITY = "syslog_priority"
KEY_RAW_EVENT = "rawEvent"
KEY_DELIMITER = "delimiter"

LEEF_HEADERS = ("deviceVendor",
                "deviceProduct",
                "deviceVersion",
                "eventId",
                KEY_DELIMITER)


class ParserDefinitionError(Exception):
    """ParserDefinitionError is raised when the given parser configuration
    is inappropriate (e.g., unknown tokenizer names).
    """
    pass


class LeefParseFailure(Exception):
    """LeefParseFailure is the base of all errors raised
    when the input line cannot be parsed as LEEF.

    If you want to pass such lines, use try-except with this exception.
    """
    pass


class NotLeef(LeefParseFailure):
    """NotLeef is raised when the input line has no
    LEEF:1.0| or LEEF:2.0| marker (case-insensitive).
    """

    def __init__(self, msg="Not a LEEF string"):
        super().__init__(msg)


class MalformedLeef(LeefParseFailure):
    """MalformedLeef is raised when the input line has a LEEF marker
    but its header is not complete (less than 5 pipes).
    """

    def __init__(self, msg="Could be a malformed LEEF string"):
        super().__init__(msg)


class GenericLeefError(LeefParseFailure):
    """Ad hoc failure with a free-format message."""

    def __init__(self, msg):
        super().__init__("Generic Error: {0}".format(msg))


class LeefParser:
    """LEEF parser object.

    LeefParser applies the following steps to a log line in order.

    #. Header: five fixed LEEF header fields, and syslog PRI, host and
       timestamp before the LEEF marker (see :func:`~header.parse_record`)
    #. Attributes: key/value pairs in the event attribute part,
       tokenized by the first matching tokenizer
       (see :mod:`~leef2map.attribute`)
    #. Labels: ``<name>Label``/``<name>`` pairs are folded into
       one renamed item (see :class:`~attribute.LabelFolder`)

    Parsed results are returned in one dict object,
    where all keys and values are strings.

    Example:
        >>> mes = ("<134>Feb 14 19:04:54 127.0.0.1 LEEF:2.0|Microsoft|MSExchange|2013|Logon Failure|"
        ...        "src=10.0.0.1 cs1Label=Reason Code cs1=404")
        >>> parser = leef2map.init_parser()
        >>> d = parser.process_line(mes)
        >>> d["ahost"], d["at"]
        ('127.0.0.1', 'Feb 14 19:04:54')
        >>> d["syslog_facility"], d["syslog_priority"]
        ('16', '6')
        >>> d["eventId"], d["src"], d["ReasonCode"]
        ('Logon Failure', '10.0.0.1', '404')

    Args:
        preserve_original (bool, optional): Add the trimmed input line
            as "rawEvent" item. Can be overridden per line.
        tokenizers (list of tokenizer, optional): Candidate tokenizers
            for the event attribute part. The first one that accepts
            the attribute text is used.
            If not given, use :func:`preset.default_tokenizers`.
        label_folder (:class:`~attribute.LabelFolder`, optional):
            Post-processing of tokenized attributes.
            Give False to disable label folding.
    """

    def __init__(self, preserve_original=False, tokenizers=None,
                 label_folder=None):
        from . import preset
        from .attribute import LabelFolder
        self.preserve_original = preserve_original
        if tokenizers is None:
            tokenizers = preset.default_tokenizers()
        self.tokenizers = tuple(tokenizers)
        if label_folder is None:
            label_folder = LabelFolder()
        self.label_folder = label_folder

    def process_header(self, line, verbose=False):
        """Parse LEEF header part in a log message.

        If the log message is not LEEF, it raises :class:`NotLeef`.
        If the header is incomplete, it raises :class:`MalformedLeef`.
        Syslog items in front of the LEEF marker are also extracted.

        Args:
            line (str): A log message.
            verbose (bool, optional): Show extracted header fields
                and envelope items.

        Returns:
            :class:`~header.LeefRecord`
        """
        from .header import parse_record
        record = parse_record(line)
        if verbose:
            print("header: {0}".format(record.header.as_dict()))
            print("envelope: {0}".format(record.envelope_dict()))
        return record

    def process_attributes(self, attributes, delimiter=None, verbose=False):
        """Parse the event attribute part of a LEEF message.

        Args:
            attributes (str): Event attribute part.
            delimiter (str, optional): Delimiter declared in LEEF header.
            verbose (bool, optional): Show the selected tokenizer
                and folded labels.

        Returns:
            dict: event attributes.
        """
        if attributes == "":
            return {}
        for tok in self.tokenizers:
            if tok.accept(attributes, delimiter):
                if verbose:
                    print("tokenizer: {0}".format(tok.__class__.__name__))
                d = tok.tokenize(attributes, delimiter)
                break
        else:
            if verbose:
                print("tokenizer: no match")
            return {}

        if self.label_folder:
            d = self.label_folder.fold(d, verbose=verbose)
        return d

    def process_line(self, line, preserve_original=None, verbose=False):
        """Parse a LEEF message (i.e., a line).

        Args:
            line (str): A log message, optionally in syslog envelope.
            preserve_original (bool, optional): Add "rawEvent" item.
                Defaults to the value given to the constructor.
            verbose (bool, optional): Show intermediate progress
                of parsing.

        Returns:
            dict: parsed data.
        """
        if preserve_original is None:
            preserve_original = self.preserve_original
        if verbose:
            print("line: {0}".format(line))

        record = self.process_header(line, verbose)
        attrs = self.process_attributes(record.event_attributes_raw,
                                        record.header.delimiter, verbose)

        d = record.header.as_dict()
        d.update(record.envelope_dict())
        d.update(attrs)
        if preserve_original:
            d[KEY_RAW_EVENT] = line.strip()
        return d


def init_parser(preserve_original=False, tokenizers=None, label_folder=None):
    """Generate :class:`LeefParser` object.

    If no arguments are given,
    this function generates LeefParser with default configurations.

    Args:
        preserve_original (bool, optional): see :class:`LeefParser`.
        tokenizers (list of tokenizer, optional):
            If not given, use :func:`preset.default_tokenizers`.
        label_folder (:class:`~attribute.LabelFolder`, optional):
            see :class:`LeefParser`.
    """
    return LeefParser(preserve_original=preserve_original,
                      tokenizers=tokenizers,
                      label_folder=label_folder)


def parse(line, preserve_original=False):
    """Parse one LEEF line with the default parser.

    Args:
        line (str): A log message, optionally in syslog envelope.
        preserve_original (bool, optional): Add the trimmed input line
            as "rawEvent" item.

    Returns:
        dict: parsed data.
    """
    return init_parser().process_line(line, preserve_original=preserve_original)
