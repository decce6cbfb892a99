"""
File Store
Synchronous, read-only access to template files
"""
from pathlib import Path
from typing import Union

from sanicview.defaults import DEFAULT_TEMPLATE_ENCODING
from sanicview.exceptions import TemplateNotFoundException


class FileStore:

    def __init__(self, encoding: str = DEFAULT_TEMPLATE_ENCODING):
        """
        Initialize file store

        Args:
            encoding: Encoding used to decode template files
        """
        self.encoding = encoding

    def read(self, path: Union[str, Path]) -> str:
        """
        Read a template file

        Raises:
            TemplateNotFoundException: file missing or unreadable
        """
        try:
            with open(path, 'r', encoding=self.encoding) as f:
                return f.read()
        except OSError as e:
            raise TemplateNotFoundException(str(path)) from e
