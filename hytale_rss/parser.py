from __future__ import annotations

from typing import Union

from bs4 import BeautifulSoup, ParserRejectedMarkup

from .exceptions import ParseError


def parse_document(content: Union[bytes, str]) -> BeautifulSoup:
    """
    Parse an HTML page into a BeautifulSoup tree.

    Duplicate attributes keep their first value. Raises ParseError when the
    parser rejects the markup.
    """
    try:
        return BeautifulSoup(content, "html.parser", on_duplicate_attribute="ignore")
    except ParserRejectedMarkup as e:
        raise ParseError(f"Failed to parse HTML ({e})") from e
