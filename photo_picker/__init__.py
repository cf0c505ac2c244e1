# Photo Number Picker
# A Python tool to copy photos listed by number, preferring RAW files over JPEG

from .models import (
    PriorityClass, MatchReport, CopySuccess, CopyFailure, CopyReport, ProcessingStats
)
from .exceptions import (
    ProcessingError, ValidationError, DirectoryError, CopyError
)
from .config import PickerConfig
from .number_extractor import extract_identifiers
from .matcher import match_files, prioritize_files, is_match
from .path_validator import PathValidator
from .file_scanner import FileScanner
from .copier import Copier
from .logger import ProgressLogger, LogConfig, create_default_logger, get_default_log_file
from .copy_manager import CopyManager

__all__ = [
    'PriorityClass',
    'MatchReport',
    'CopySuccess',
    'CopyFailure',
    'CopyReport',
    'ProcessingStats',
    'ProcessingError',
    'ValidationError',
    'DirectoryError',
    'CopyError',
    'PickerConfig',
    'extract_identifiers',
    'match_files',
    'prioritize_files',
    'is_match',
    'PathValidator',
    'FileScanner',
    'Copier',
    'ProgressLogger',
    'LogConfig',
    'create_default_logger',
    'get_default_log_file',
    'CopyManager'
]
