"""
Persistence for pointgeom values.
"""
from .archive import ARCHIVE_VERSION, FIELDS, encode, decode, dump_yaml, load_yaml

__all__ = ['ARCHIVE_VERSION', 'FIELDS', 'encode', 'decode', 'dump_yaml', 'load_yaml']
