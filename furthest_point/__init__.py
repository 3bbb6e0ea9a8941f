from .stream import TextCursor, Position
from .scalars import PointKind, SCALAR_TYPES, scalar_dtype
from .errors import ErrorKind, PointError, EmptyStreamError, InvalidSymbolError, ParseFailure
from .point import Point, ParseResult, read_point, distance
from .scan import find_max, ScanResult, ScanEvent, ScanStatus
from .config import ScanConfig, get_scan_config, set_scan_config
from .driver import Job, print_max, run_jobs, scan_file, format_report

__all__ = [
    'TextCursor',
    'Position',
    'PointKind',
    'SCALAR_TYPES',
    'scalar_dtype',
    'ErrorKind',
    'PointError',
    'EmptyStreamError',
    'InvalidSymbolError',
    'ParseFailure',
    'Point',
    'ParseResult',
    'read_point',
    'distance',
    'find_max',
    'ScanResult',
    'ScanEvent',
    'ScanStatus',
    'ScanConfig',
    'get_scan_config',
    'set_scan_config',
    'Job',
    'print_max',
    'run_jobs',
    'scan_file',
    'format_report',
]
