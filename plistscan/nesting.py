'''
Where the next value goes.

State pattern, one state object per open container. The states of the
enclosing containers are kept on an explicit stack so that nesting depth
never turns into Python call depth.
'''
from plistscan.errors import (MissingKeyTag, DuplicateKeyTag,
    UnexpectedKeyTag, UnexpectedClosingTag, MaxDepthExceeded)

DEFAULT_MAX_DEPTH = 10000


class BaseState(object):
    """
    Base class for nesting states.

    @ivar container: the dict or list values are stored into, or None
    """
    container = None

    def attach(self, machine, value):
        "Store value (a scalar or a freshly made container) in my container."
        raise NotImplementedError()

    def acceptKey(self, machine, key):
        machine.fail(UnexpectedKeyTag, 'unexpected <key>')

    def pendingKey(self):
        return None


class RootState(BaseState):
    """
    Outside of any container. A value stored here becomes the result;
    a later one replaces it.
    """
    def attach(self, machine, value):
        machine.root = value


class MappingState(BaseState):
    """
    Inside a <dict>. Values are stored under the key read just before.

    @ivar key: the <key> awaiting its value, or None
    """
    def __init__(self, container):
        self.container = container
        self.key = None

    def attach(self, machine, value):
        if self.key is None:
            machine.fail(MissingKeyTag, 'missing <key>')
        self.container[self.key] = value
        self.key = None

    def acceptKey(self, machine, key):
        if self.key is not None:
            machine.fail(DuplicateKeyTag, 'too many <key>')
        self.key = key

    def pendingKey(self):
        return self.key


class SequenceState(BaseState):
    "Inside an <array>. Values are appended."
    def __init__(self, container):
        self.container = container

    def attach(self, machine, value):
        self.container.append(value)


class NestingStateMachine(object):
    '''
    I build the tree. Feed me containers, keys and values in document
    order; the result ends up in root.

    @ivar state: the state of the innermost open container

    @ivar stack: the states of the enclosing containers, outermost first

    @ivar root: the top-level value, None until one is seen

    @ivar maxDepth: how many containers may be open at once, None for
        no limit

    @ivar fail: callable(errorClass, reason) raising a positioned error
    '''
    def __init__(self, fail, maxDepth=DEFAULT_MAX_DEPTH):
        self.fail = fail
        self.maxDepth = maxDepth
        self.state = RootState()
        self.stack = []
        self.root = None

    @property
    def curKey(self):
        return self.state.pendingKey()

    @property
    def cur(self):
        "The container being filled, or the root value at top level."
        if isinstance(self.state, RootState):
            return self.root
        return self.state.container

    def depth(self):
        "Number of open containers."
        return len(self.stack)

    def _push(self, newState):
        if self.maxDepth is not None and len(self.stack) >= self.maxDepth:
            self.fail(MaxDepthExceeded,
                'containers nested deeper than %d' % self.maxDepth)
        self.stack.append(self.state)
        self.state = newState

    def _pop(self):
        self.state = self.stack.pop()

    def enterMapping(self):
        mapping = {}
        self.state.attach(self, mapping)
        self._push(MappingState(mapping))

    def leaveMapping(self):
        if not isinstance(self.state, MappingState):
            self.fail(UnexpectedClosingTag, 'unexpected </dict>')
        self._pop()

    def enterSequence(self):
        sequence = []
        self.state.attach(self, sequence)
        self._push(SequenceState(sequence))

    def leaveSequence(self):
        if not isinstance(self.state, SequenceState):
            self.fail(UnexpectedClosingTag, 'unexpected </array>')
        self._pop()

    def acceptKey(self, key):
        self.state.acceptKey(self, key)

    def acceptValue(self, value):
        "A scalar: store it wherever the current state says."
        self.state.attach(self, value)
