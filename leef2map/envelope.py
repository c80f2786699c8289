# coding: utf-8

"""Syslog envelope in front of LEEF messages.

LEEF messages are usually forwarded over syslog, so the LEEF payload
is often preceded by a syslog PRI part and a timestamp and/or hostname
of the forwarding agent.

| e.g.,
    ``<134>Feb 14 19:04:54 127.0.0.1 LEEF:2.0|Vendor|Product|1.0|Event|src=...``

The items derived here are:

* syslog_facility (str): PRI >> 3
* syslog_priority (str): PRI & 7 (i.e., severity)
* at (str): raw timestamp text of the agent, not normalized
* ahost (str): hostname or IP address of the agent
"""

import re

from . import _common

_KEY_AHOST = _common.KEY_AHOST
_KEY_AT = _common.KEY_AT
_KEY_FACILITY = _common.KEY_SYSLOG_FACILITY
_KEY_PRIORITY = _common.KEY_SYSLOG_PRIORITY

# version marker, e.g. "LEEF:2.0|"; a bare "leef:" in attribute values is not a marker
_marker_regex = re.compile(r"leef:[12]\.0\|", re.IGNORECASE)
_MARKER_PREFIX = len("LEEF:")

# decimal PRI fitting in 16 bits, e.g. "134"
_pri_regex = re.compile(r"^[+-]?[0-9]+$")
_PRI_MIN = -2 ** 15
_PRI_MAX = 2 ** 15 - 1


def is_leef(line):
    """Test that the line has LEEF:1.0| or LEEF:2.0| marker
    (case-insensitive)."""
    return _marker_regex.search(line) is not None


def split_envelope(line):
    """Split a line on the first LEEF version marker.

    Example:
        >>> split_envelope("<134>host LEEF:2.0|V|P|1.0|E|msg=see leef: docs")
        ('<134>host ', '2.0|V|P|1.0|E|msg=see leef: docs')

    Args:
        line (str): A log message.

    Returns:
        tuple: envelope (str or None) and LEEF payload after "LEEF:".
        The envelope is None if the marker is at the head of the line.
        Both are None if the line has no marker.
    """
    mo = _marker_regex.search(line)
    if mo is None:
        return None, None
    envelope = line[:mo.start()]
    payload = line[mo.start() + _MARKER_PREFIX:]
    if envelope == "":
        return None, payload
    return envelope, payload


def is_datetime_str(s):
    """Loosely test that the given token looks like a timestamp,
    e.g., ``Feb 19 19:00:00`` or ``2020-02-19T00:00:00``.

    Hostnames including hyphens are also regarded as timestamps.
    """
    return (":" in s and "-" in s) or "-" in s or s.count(" ") >= 1


def _split_pri(data):
    # <PRI>rest -> (facility, priority, rest)
    if not (data.startswith("<") and ">" in data):
        return None, None, data
    end = data.index(">")
    rest = data[end + 1:]
    pristr = data[1:end]
    if not _pri_regex.match(pristr):
        return None, None, rest
    pri = int(pristr)
    if not _PRI_MIN <= pri <= _PRI_MAX:
        return None, None, rest
    return str(pri >> 3), str(pri & 7), rest


def _single_token(token):
    if token == "":
        return {}
    if is_datetime_str(token):
        return {_KEY_AT: token}
    else:
        return {_KEY_AHOST: token}


def _host_and_time(data):
    n_spaces = data.count(" ")
    if n_spaces == 0:
        return _single_token(data)
    elif n_spaces == 2:
        # human readable timestamp only, e.g., "Feb 14 19:04:54"
        return {_KEY_AT: data}
    else:
        # timestamp followed by host
        tokens = [t for t in data.rsplit(" ", 1) if t != ""]
        if len(tokens) == 2:
            return {_KEY_AT: tokens[0], _KEY_AHOST: tokens[1]}
        else:
            return _single_token(tokens[0])


def parse_envelope(envelope):
    """Extract syslog items from an envelope string.

    Args:
        envelope (str): Text before the LEEF marker.

    Returns:
        dict: derived items only. Unparsable PRI is just ignored.
    """
    ret = {}
    facility, priority, data = _split_pri(envelope.strip())
    if facility is not None:
        ret[_KEY_FACILITY] = facility
        ret[_KEY_PRIORITY] = priority
    ret.update(_host_and_time(data.strip()))
    return ret
