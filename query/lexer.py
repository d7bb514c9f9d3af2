# query/lexer.py
# This file is part of Taurus - A Labelled Transition System Explorer
#
# Lexical analyzer for graph query tokenization using SLY

"""Lexical analyzer for graph query strings.

Supported Tokens:
- Punctuation: (, ), ;
- Integers: node ids
- Names: query function names
- Whitespace: ignored during tokenization
"""

from sly import Lexer
from utils.logger import get_logger


class QueryLexer(Lexer):
    """SLY-based lexer for graph query tokenization.

    Attributes:
        tokens: Set of valid token types
        ignore: Characters to skip during tokenization
    """

    tokens = {
        "NAME",
        "INT",
        "LPAREN",
        "RPAREN",
        "SEMI",
    }

    ignore = " \t\r\n"

    LPAREN = r"\("
    RPAREN = r"\)"
    SEMI = r";"

    NAME = r"[a-zA-Z_][a-zA-Z0-9_]*"

    @_(r"\d+")
    def INT(self, t):
        t.value = int(t.value)
        return t

    def error(self, t):
        """Handle illegal characters during tokenization.

        Args:
            t: SLY token object containing error context

        Raises:
            ValueError: Always raised with character and position information
        """
        logger = get_logger()

        illegal_char = t.value[0]
        error_pos = self.index

        logger.debug(f"Illegal character '{illegal_char}' at position {error_pos}")

        self.index += 1

        raise ValueError(
            f"Illegal character '{illegal_char}' encountered at position {error_pos}"
        )
