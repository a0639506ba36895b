import datetime
from twisted.trial import unittest
from plistscan.values import Data, ValueKind, kindOf
from plistscan.proplist import parse

class KindOfTest(unittest.TestCase):
    def test_every_tag(self):
        tree = parse("""<array>
            <string>s</string><integer>1</integer><real>1.5</real>
            <true/><false/><date>2020-02-29T00:00:00Z</date>
            <data>AA==</data><dict/><array/>
        </array>""")
        self.assertEqual([ValueKind.STRING, ValueKind.INTEGER, ValueKind.REAL,
            ValueKind.BOOLEAN, ValueKind.BOOLEAN, ValueKind.DATE,
            ValueKind.DATA, ValueKind.MAPPING, ValueKind.SEQUENCE],
            [kindOf(v) for v in tree])
        self.assertEqual(ValueKind.SEQUENCE, kindOf(tree))

    def test_not_a_value(self):
        self.assertRaises(TypeError, kindOf, None)
        self.assertRaises(TypeError, kindOf, datetime.date(2020, 1, 1))
        self.assertRaises(TypeError, kindOf, b'AA==')

class DataTest(unittest.TestCase):
    def test_equality(self):
        self.assertEqual(Data('AA=='), Data('AA=='))
        self.assertNotEqual(Data('AA=='), Data('AQ=='))
        self.assertFalse(Data('AA==') != Data('AA=='))
        self.assertTrue(Data('AA==') != 'AA==')
        self.assertEqual(hash(Data('AA==')), hash(Data('AA==')))

    def test_repr(self):
        self.assertEqual("Data('AA==')", repr(Data('AA==')))
