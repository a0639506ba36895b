from twisted.trial import unittest
from plistscan.nesting import NestingStateMachine, RootState, MappingState, SequenceState
from plistscan import errors

class FailRecorder(object):
    "Stands in for Scanner.fail"
    def __call__(self, errorClass, reason):
        raise errorClass(reason, 0, '')

class NestingStateMachineTest(unittest.TestCase):
    def setUp(self):
        self.m = NestingStateMachine(FailRecorder())

    def test_initial_state(self):
        self.assertIsInstance(self.m.state, RootState)
        self.assertEqual(0, self.m.depth())
        self.assertIdentical(None, self.m.root)
        self.assertIdentical(None, self.m.curKey)

    def test_root_scalar_replaced(self):
        self.m.acceptValue('a')
        self.m.acceptValue(1)
        self.assertEqual(1, self.m.root)
        self.assertEqual(1, self.m.cur)

    def test_mapping(self):
        m = self.m
        m.enterMapping()
        self.assertIsInstance(m.state, MappingState)
        self.assertEqual(1, m.depth())
        m.acceptKey('k')
        self.assertEqual('k', m.curKey)
        m.acceptValue('v')
        self.assertIdentical(None, m.curKey)
        m.leaveMapping()
        self.assertIsInstance(m.state, RootState)
        self.assertEqual({'k': 'v'}, m.root)
        self.assertEqual({'k': 'v'}, m.cur)

    def test_nested_containers_linked_into_parent(self):
        m = self.m
        m.enterSequence()
        m.enterMapping()
        m.acceptKey('a')
        m.enterSequence()
        self.assertIdentical(None, m.curKey)
        self.assertEqual(3, m.depth())
        m.acceptValue(True)
        m.leaveSequence()
        self.assertIsInstance(m.state, MappingState)
        m.leaveMapping()
        self.assertIsInstance(m.state, SequenceState)
        m.acceptValue(2)
        m.leaveSequence()
        self.assertEqual([{'a': [True]}, 2], m.root)

    def test_key_pending_only_in_mapping(self):
        m = self.m
        m.enterMapping()
        m.acceptKey('a')
        self.assertRaises(errors.DuplicateKeyTag, m.acceptKey, 'b')

    def test_value_without_key(self):
        self.m.enterMapping()
        self.assertRaises(errors.MissingKeyTag, self.m.acceptValue, 1)
        self.assertRaises(errors.MissingKeyTag, self.m.enterMapping)
        self.assertRaises(errors.MissingKeyTag, self.m.enterSequence)

    def test_key_outside_mapping(self):
        self.assertRaises(errors.UnexpectedKeyTag, self.m.acceptKey, 'a')
        self.m.enterSequence()
        self.assertRaises(errors.UnexpectedKeyTag, self.m.acceptKey, 'a')

    def test_unmatched_leave(self):
        m = self.m
        self.assertRaises(errors.UnexpectedClosingTag, m.leaveMapping)
        self.assertRaises(errors.UnexpectedClosingTag, m.leaveSequence)
        m.enterMapping()
        self.assertRaises(errors.UnexpectedClosingTag, m.leaveSequence)
        m.acceptKey('a')
        m.enterSequence()
        self.assertRaises(errors.UnexpectedClosingTag, m.leaveMapping)

    def test_max_depth(self):
        m = NestingStateMachine(FailRecorder(), maxDepth=2)
        m.enterSequence()
        m.enterSequence()
        self.assertRaises(errors.MaxDepthExceeded, m.enterMapping)

    def test_no_max_depth(self):
        m = NestingStateMachine(FailRecorder(), maxDepth=None)
        for i in range(50):
            m.enterSequence()
        self.assertEqual(50, m.depth())
