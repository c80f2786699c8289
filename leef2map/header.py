# coding: utf-8

from . import _common
from .envelope import is_leef, parse_envelope, split_envelope

_LEEF_HEADERS = _common.LEEF_HEADERS

# LEEF requires 5 pipes at least: LEEF:V|Vendor|Product|Version|EventID|
_MIN_PIPES = 5


class LeefHeader:
    """Fixed header fields of a LEEF message.

    Fields are filled in order of :data:`~_common.LEEF_HEADERS`.
    Fields not given in the message stay None,
    and they are not included in :meth:`as_dict`.

    Args:
        values (list of str): header tokens after the LEEF version.
            Tokens more than the number of fields are ignored.
    """

    __slots__ = ("deviceVendor", "deviceProduct", "deviceVersion",
                 "eventId", "delimiter")

    def __init__(self, values=()):
        values = list(values)
        for i, name in enumerate(_LEEF_HEADERS):
            if i < len(values):
                setattr(self, name, values[i])
            else:
                setattr(self, name, None)

    def items(self):
        for name in _LEEF_HEADERS:
            value = getattr(self, name)
            if value is not None:
                yield name, value

    def as_dict(self):
        return dict(self.items())

    def __eq__(self, other):
        if not isinstance(other, LeefHeader):
            return NotImplemented
        return self.as_dict() == other.as_dict()

    def __repr__(self):
        return "LeefHeader({0})".format(self.as_dict())


class LeefRecord:
    """Intermediate parsed data of one LEEF message.

    Attributes:
        version (str): LEEF version, e.g. "2.0".
        header (:class:`LeefHeader`): fixed header fields.
        event_attributes_raw (str): unparsed event attribute part.
        syslog_facility (str or None)
        syslog_priority (str or None)
        at (str or None)
        ahost (str or None)
    """

    _envelope_keys = (_common.KEY_AHOST, _common.KEY_AT,
                      _common.KEY_SYSLOG_FACILITY,
                      _common.KEY_SYSLOG_PRIORITY)

    def __init__(self, version, header, event_attributes_raw):
        self.version = version
        self.header = header
        self.event_attributes_raw = event_attributes_raw
        self.syslog_facility = None
        self.syslog_priority = None
        self.at = None
        self.ahost = None

    def update_envelope(self, envelope):
        for key in self._envelope_keys:
            if key in envelope:
                setattr(self, key, envelope[key])

    def envelope_dict(self):
        return {key: getattr(self, key) for key in self._envelope_keys
                if getattr(self, key) is not None}


def split_header(payload):
    """Split LEEF payload (text after "LEEF:") into header and attributes.

    Args:
        payload (str): e.g. "2.0|Vendor|Product|1.0|EventID|src=127.0.0.1"

    Returns:
        tuple: version (str), :class:`LeefHeader`, and attribute part (str).
    """
    if "|" not in payload:
        raise _common.MalformedLeef()
    head, attributes = payload.rsplit("|", 1)
    tokens = head.split("|")
    version = tokens[0].strip()
    header = LeefHeader([t.strip() for t in tokens[1:]])
    return version, header, attributes


def parse_record(line):
    """Parse a line into :class:`LeefRecord`,
    including the syslog items in its envelope.

    Raises :class:`~_common.NotLeef` if the line has no LEEF marker,
    and :class:`~_common.MalformedLeef` if it has less than 5 pipes.

    Args:
        line (str): A log message.

    Returns:
        :class:`LeefRecord`
    """
    if not is_leef(line):
        raise _common.NotLeef()
    if line.count("|") < _MIN_PIPES:
        raise _common.MalformedLeef()

    envelope, payload = split_envelope(line)
    version, header, attributes = split_header(payload)
    record = LeefRecord(version, header, attributes)
    if envelope is not None:
        record.update_envelope(parse_envelope(envelope))
    return record
