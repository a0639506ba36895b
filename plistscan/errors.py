'''
Errors raised while parsing property lists.
'''

EXCERPT_LENGTH = 50


class PlistError(Exception):
    '''
    The document could not be parsed. Never recovered from.

    @ivar offset: the character offset at which parsing stopped

    @ivar excerpt: up to EXCERPT_LENGTH characters of input starting at offset

    @ivar reason: what went wrong, without position information
    '''
    def __init__(self, reason, offset, excerpt):
        super(PlistError, self).__init__(
            'Near offset %d: %s ~~~%s~~~' % (offset, reason, excerpt))
        self.reason = reason
        self.offset = offset
        self.excerpt = excerpt


class MissingKeyTag(PlistError):
    "A value inside a <dict> without a preceding <key>."

class DuplicateKeyTag(PlistError):
    "A second <key> before the first one got its value."

class UnexpectedKeyTag(PlistError):
    "A <key> at top level or inside an <array>."

class UnexpectedClosingTag(PlistError):
    "A closing tag which closes nothing, or which I do not know."

class ExpectedTagOpen(PlistError):
    "Something other than '<' where a tag should start."

class UnexpectedEndOfInput(PlistError):
    "The input stops right after a '<'."

class InvalidNumber(PlistError):
    "The body of an <integer> or <real> is not a number."

class InvalidDate(PlistError):
    "The body of a <date> is not an ISO 8601 timestamp."

class UnexpectedOpeningTag(PlistError):
    "An opening tag I do not know."

class MaxDepthExceeded(PlistError):
    "Containers are nested deeper than the parser allows."

class InvalidEncoding(PlistError):
    "A file whose bytes are not UTF-8."
