'''
Cursor over the text of a property list.
'''
from plistscan.errors import EXCERPT_LENGTH

BYTE_ORDER_MARK = '\ufeff'
WHITESPACE = ' \t\r\n'


class Scanner(object):
    '''
    I own the read position into a fixed piece of text. The position
    only ever moves forward.

    @ivar content: the text being scanned

    @ivar pos: offset of the next unread character

    @ivar length: len(content)
    '''
    def __init__(self, content):
        self.content = content
        self.length = len(content)
        self.pos = 0
        if content.startswith(BYTE_ORDER_MARK):
            self.pos = 1

    def atEnd(self):
        "True if everything has been consumed."
        return self.pos >= self.length

    def peek(self):
        "The next character, not consumed. Must not be called at the end."
        return self.content[self.pos]

    def next(self):
        "Consume and return the next character."
        ch = self.content[self.pos]
        self.pos += 1
        return ch

    def skipWhitespace(self):
        content, pos, length = self.content, self.pos, self.length
        while pos < length and content[pos] in WHITESPACE:
            pos += 1
        self.pos = pos

    def advanceIfStartsWith(self, literal):
        "Skip literal if the text continues with it. Report whether it did."
        if self.content.startswith(literal, self.pos):
            self.pos += len(literal)
            return True
        return False

    def advanceUntil(self, delimiter):
        """
        Move past the next occurrence of delimiter. A missing delimiter
        takes me to the end of the input; that is not an error.
        """
        found = self.content.find(delimiter, self.pos)
        if found == -1:
            self.pos = self.length
        else:
            self.pos = found + len(delimiter)

    def captureUntil(self, delimiter):
        "Like advanceUntil, but return the text skipped before the delimiter."
        start = self.pos
        found = self.content.find(delimiter, start)
        if found == -1:
            self.pos = self.length
            return self.content[start:]
        self.pos = found + len(delimiter)
        return self.content[start:found]

    def excerpt(self):
        return self.content[self.pos:self.pos + EXCERPT_LENGTH]

    def fail(self, errorClass, reason):
        "Raise errorClass, positioned at the current offset."
        raise errorClass(reason, self.pos, self.excerpt())
