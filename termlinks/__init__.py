"""termlinks

Finds URLs and file paths in terminal text and opens them.
"""

__all__ = ["DetectedLink", "LinkDetector", "LinkKind", "__version__"]
__version__ = "0.1.0"

from termlinks.core import DetectedLink, LinkDetector, LinkKind  # noqa: E402
