"""
Proplist parser
"""
import datetime
import re

from twisted.python import log

from plistscan.scanner import Scanner
from plistscan.nesting import NestingStateMachine, DEFAULT_MAX_DEPTH
from plistscan.values import Data
from plistscan.errors import (ExpectedTagOpen, UnexpectedEndOfInput,
    UnexpectedClosingTag, UnexpectedOpeningTag, InvalidNumber, InvalidDate,
    InvalidEncoding, EXCERPT_LENGTH)

ENTITY_PATTERN = re.compile(
    r'&(?:#([0-9]+)|#x([0-9a-fA-F]+)|(amp|lt|gt|quot|apos));')
NAMED_ENTITIES = {
    'amp': '&',
    'lt': '<',
    'gt': '>',
    'quot': '"',
    'apos': "'",
}
INTEGER_PATTERN = re.compile(r'[+-]?[0-9]+\Z')
# tried before fromisoformat, whose accepted forms vary between Pythons
PLIST_DATE_FORMATS = ('%Y-%m-%dT%H:%M:%SZ', '%Y-%m-%dT%H:%M:%S.%fZ')


def _replaceEntity(match):
    decimal, hexadecimal, name = match.groups()
    if name is not None:
        return NAMED_ENTITIES[name]
    if decimal is not None:
        codePoint = int(decimal, 10)
    else:
        codePoint = int(hexadecimal, 16)
    if codePoint > 0x10FFFF:
        return match.group(0)
    return chr(codePoint)


def unescape(text):
    """
    Replace character references and the five predefined entities.
    Anything else that looks like an entity stays as it is.

    This is one left-to-right pass, so text produced by a reference is never
    expanded again: '&#38;lt;' gives '&lt;'. Older parsers that expand
    numeric references first and named entities afterwards would give '<'.
    """
    if '&' not in text:
        return text
    return ENTITY_PATTERN.sub(_replaceEntity, text)


def parseInteger(scanner, text):
    text = text.strip()
    if not INTEGER_PATTERN.match(text):
        scanner.fail(InvalidNumber, 'cannot parse integer')
    return int(text, 10)


def parseReal(scanner, text):
    text = text.strip()
    try:
        if '_' in text:
            raise ValueError(text)
        value = float(text)
    except ValueError:
        scanner.fail(InvalidNumber, 'cannot parse float')
    if value != value:
        # NaN
        scanner.fail(InvalidNumber, 'cannot parse float')
    return value


def parseDate(scanner, text):
    """
    ISO 8601 as property lists write it, 2011-05-03T12:34:56Z. Timestamps
    without an offset are taken as UTC.
    """
    text = text.strip()
    for dateFormat in PLIST_DATE_FORMATS:
        try:
            value = datetime.datetime.strptime(text, dateFormat)
        except ValueError:
            continue
        return value.replace(tzinfo=datetime.timezone.utc)
    if text.endswith('Z'):
        text = text[:-1] + '+00:00'
    try:
        value = datetime.datetime.fromisoformat(text)
    except ValueError:
        scanner.fail(InvalidDate, 'cannot parse date')
    if value.tzinfo is None:
        value = value.replace(tzinfo=datetime.timezone.utc)
    return value


class Tag(object):
    '''
    An opening tag.

    @ivar name: tag name, attributes included

    @ivar isClosed: True for self-closing tags like <dict/>
    '''
    def __init__(self, name, isClosed):
        self.name = name
        self.isClosed = isClosed


class TagDispatcher(object):
    '''
    I read tags off a Scanner and tell a NestingStateMachine what they mean.

    @ivar scanner: where the tags come from

    @ivar machine: where the values go
    '''
    def __init__(self, scanner, machine):
        self.scanner = scanner
        self.machine = machine
        self._openers = {
            'dict': self._openDict,
            'array': self._openArray,
            'key': self._openKey,
            'string': self._openString,
            'real': self._openReal,
            'integer': self._openInteger,
            'date': self._openDate,
            'data': self._openData,
            'true': self._openTrue,
            'false': self._openFalse,
        }

    def run(self):
        "Consume the whole input. Return the top-level value."
        scanner = self.scanner
        while not scanner.atEnd():
            scanner.skipWhitespace()
            if scanner.atEnd():
                break
            if scanner.next() != '<':
                scanner.fail(ExpectedTagOpen, 'expected <')
            if scanner.atEnd():
                scanner.fail(UnexpectedEndOfInput, 'unexpected end of input')

            ch = scanner.peek()
            if ch == '?':
                scanner.next()
                scanner.advanceUntil('?>')
            elif ch == '!':
                scanner.next()
                if scanner.advanceIfStartsWith('--'):
                    scanner.advanceUntil('-->')
                else:
                    scanner.advanceUntil('>')
            elif ch == '/':
                scanner.next()
                self._close()
            else:
                self._open(self._readOpenTag())
        return self.machine.root

    def _close(self):
        scanner = self.scanner
        scanner.skipWhitespace()
        if scanner.advanceIfStartsWith('plist'):
            scanner.advanceUntil('>')
        elif scanner.advanceIfStartsWith('dict'):
            scanner.advanceUntil('>')
            self.machine.leaveMapping()
        elif scanner.advanceIfStartsWith('array'):
            scanner.advanceUntil('>')
            self.machine.leaveSequence()
        else:
            scanner.fail(UnexpectedClosingTag, 'unexpected closed tag')

    def _readOpenTag(self):
        text = self.scanner.captureUntil('>')
        isClosed = text.endswith('/')
        if isClosed:
            text = text[:-1]
        return Tag(text.strip(), isClosed)

    def _open(self, tag):
        opener = self._openers.get(tag.name)
        if opener is not None:
            opener(tag)
        elif tag.name.startswith('plist'):
            # the root element, maybe with a version attribute
            pass
        else:
            self.scanner.fail(UnexpectedOpeningTag,
                'unexpected opened tag ' + tag.name)

    def _tagValue(self, tag):
        """
        The unescaped body of tag. Reads up to the next '</' and skips the
        closing tag whatever its name.
        """
        if tag.isClosed:
            return ''
        text = self.scanner.captureUntil('</')
        self.scanner.advanceUntil('>')
        return unescape(text)

    def _openDict(self, tag):
        self.machine.enterMapping()
        if tag.isClosed:
            self.machine.leaveMapping()

    def _openArray(self, tag):
        self.machine.enterSequence()
        if tag.isClosed:
            self.machine.leaveSequence()

    def _openKey(self, tag):
        self.machine.acceptKey(self._tagValue(tag))

    def _openString(self, tag):
        self.machine.acceptValue(self._tagValue(tag))

    def _openReal(self, tag):
        self.machine.acceptValue(parseReal(self.scanner, self._tagValue(tag)))

    def _openInteger(self, tag):
        self.machine.acceptValue(
            parseInteger(self.scanner, self._tagValue(tag)))

    def _openDate(self, tag):
        self.machine.acceptValue(parseDate(self.scanner, self._tagValue(tag)))

    def _openData(self, tag):
        self.machine.acceptValue(Data(self._tagValue(tag)))

    def _openTrue(self, tag):
        self._tagValue(tag)
        self.machine.acceptValue(True)

    def _openFalse(self, tag):
        self._tagValue(tag)
        self.machine.acceptValue(False)


def parse(content, maxDepth=DEFAULT_MAX_DEPTH):
    """Parse the text of an XML property list. Return the top-level value:
    a dict, a list or a scalar. Not error-tolerant at all; raises a
    PlistError subclass pointing at the offending offset.
    """
    scanner = Scanner(content)
    machine = NestingStateMachine(scanner.fail, maxDepth=maxDepth)
    return TagDispatcher(scanner, machine).run()


def parseFile(filelike, maxDepth=DEFAULT_MAX_DEPTH):
    """Parse a property list from a file-like, e.g. a sparse bundle's
    Info.plist. Bytes are decoded as UTF-8; anything else raises
    InvalidEncoding at the first bad byte.
    """
    content = filelike.read()
    if isinstance(content, bytes):
        try:
            content = content.decode('utf-8')
        except UnicodeDecodeError as e:
            excerpt = content[e.start:e.start + EXCERPT_LENGTH].decode(
                'utf-8', 'replace')
            raise InvalidEncoding('not UTF-8: %s' % e.reason, e.start, excerpt)
    log.msg('parsing property list from %s (%d characters)'
        % (getattr(filelike, 'name', '<stream>'), len(content)))
    return parse(content, maxDepth=maxDepth)
