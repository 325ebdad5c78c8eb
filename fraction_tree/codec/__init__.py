"""
Path Codec — L/R кодировка узлов дерева.
"""

from fraction_tree.codec.path_codec import (
    IDENTITY_MATRIX,
    LEFT_MATRIX,
    LEFT_SYMBOLS,
    RIGHT_MATRIX,
    RIGHT_SYMBOLS,
    ROOT_CODE,
    decode,
    decode_path,
    encode,
)

__all__ = [
    # Constants
    "IDENTITY_MATRIX",
    "LEFT_MATRIX",
    "RIGHT_MATRIX",
    "LEFT_SYMBOLS",
    "RIGHT_SYMBOLS",
    "ROOT_CODE",
    # Functions
    "encode",
    "decode",
    "decode_path",
]
