"""
Fast, non-validating parser for XML property lists.
"""
from plistscan.proplist import parse, parseFile
from plistscan.errors import PlistError
from plistscan.values import Data, ValueKind, kindOf

__all__ = ['parse', 'parseFile', 'PlistError', 'Data', 'ValueKind', 'kindOf']
