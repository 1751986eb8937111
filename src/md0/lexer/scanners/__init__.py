"""Mode-specific scanners for the md0 lexer."""

from md0.lexer.scanners.block import BlockScannerMixin
from md0.lexer.scanners.fence import FenceScannerMixin

__all__ = [
    "BlockScannerMixin",
    "FenceScannerMixin",
]
