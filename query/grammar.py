# query/grammar.py
# This file is part of Taurus - A Labelled Transition System Explorer
#
# LALR(1) grammar and parser for graph queries using SLY

"""Graph query grammar implementation using SLY parser generator.

Grammar:
    queries := query (';' query)* [';']
    query   := NAME '(' ')' | NAME '(' arg ')'
    arg     := INT | query
"""

from typing import List

from sly import Parser
from .lexer import QueryLexer
from .ast_nodes import Call, IntLiteral, Query
from .exceptions import ParseError
from utils.logger import get_logger


class _QueryParser(Parser):
    """SLY-based LALR(1) parser for graph queries.

    Attributes:
        tokens: Token types from QueryLexer
    """

    tokens = QueryLexer.tokens

    @_("queries")
    def start(self, p) -> List[Query]:
        return p.queries

    @_("query")
    def queries(self, p) -> List[Query]:
        return [p.query]

    @_("queries SEMI query")
    def queries(self, p) -> List[Query]:
        return p.queries + [p.query]

    @_("queries SEMI")
    def queries(self, p) -> List[Query]:
        """Trailing separator."""
        return p.queries

    @_("NAME LPAREN RPAREN")
    def query(self, p) -> Query:
        return Call(p.NAME)

    @_("NAME LPAREN arg RPAREN")
    def query(self, p) -> Query:
        return Call(p.NAME, (p.arg,))

    @_("INT")
    def arg(self, p) -> Query:
        return IntLiteral(p.INT)

    @_("query")
    def arg(self, p) -> Query:
        return p.query

    def parse(self, text: str) -> List[Query]:
        """Parse query text into a list of ASTs.

        Args:
            text: One or more ``;``-separated queries

        Returns:
            Query ASTs in source order

        Raises:
            ParseError: If the text is empty or contains syntax errors
        """
        logger = get_logger()
        logger.debug(f"Parsing query: {text}")

        if text.strip() == "":
            raise ParseError("Input query is empty.")

        try:
            result = super().parse(QueryLexer().tokenize(text))

            if result is None:
                raise ParseError("Failed to parse query (syntax error).")

            logger.debug(f"Successfully parsed {len(result)} queries")
            return result

        except ParseError:
            logger.debug("Parse error encountered")
            raise
        except Exception as e:
            logger.debug(f"Unexpected parsing error: {e}")
            raise ParseError(f"Parse failed: {e}")

    def error(self, token):
        """Handle syntax errors during parsing.

        Args:
            token: Problematic token or None for EOF errors

        Raises:
            ParseError: Always raises with detailed error information
        """
        if token:
            error_msg = (
                f"Syntax error near '{token.value}' "
                f"(type: {token.type}) at line {token.lineno}, position {token.index}"
            )
        else:
            error_msg = "Syntax error: Unexpected end of query"

        raise ParseError(error_msg)
