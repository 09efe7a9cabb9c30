from .link_detector import LinkDetector
from .links import DetectedLink, LinkKind
from .path_scanner import detect_paths, find_paths_in_line
from .url_tokenizer import detect_urls, find_urls_in_line

__all__ = [
    "DetectedLink",
    "LinkDetector",
    "LinkKind",
    "detect_paths",
    "detect_urls",
    "find_paths_in_line",
    "find_urls_in_line",
]
