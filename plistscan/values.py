'''
The values a parsed property list is made of.

Scalars and containers are plain Python objects, except for <data>
payloads, which are wrapped in Data so they cannot be mistaken for
<string>s.
'''
import datetime
import enum


class Data(object):
    '''
    The body of a <data> tag, still encoded (normally base64).

    @ivar text: the encoded payload, entities already unescaped
    '''
    def __init__(self, text):
        self.text = text

    def __eq__(self, other):
        if not isinstance(other, Data):
            return NotImplemented
        return self.text == other.text

    def __hash__(self):
        return hash((Data, self.text))

    def __repr__(self):
        return 'Data(%r)' % (self.text,)


class ValueKind(enum.Enum):
    STRING = 'string'
    INTEGER = 'integer'
    REAL = 'real'
    BOOLEAN = 'boolean'
    DATE = 'date'
    DATA = 'data'
    MAPPING = 'dict'
    SEQUENCE = 'array'


def kindOf(value):
    """
    Tell which case of the tree a parsed value is. Raise TypeError for
    anything the parser never produces.
    """
    # bool before int: True is an int too
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, int):
        return ValueKind.INTEGER
    if isinstance(value, float):
        return ValueKind.REAL
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, datetime.datetime):
        return ValueKind.DATE
    if isinstance(value, Data):
        return ValueKind.DATA
    if isinstance(value, dict):
        return ValueKind.MAPPING
    if isinstance(value, list):
        return ValueKind.SEQUENCE
    raise TypeError('not a property list value: %r' % (value,))
