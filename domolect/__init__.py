"""Parser and simulator for Domolect home-automation commands."""

__version__ = "0.1.0"

from domolect.domain.command_parser import CommandParser
from domolect.domain.errors import DomolectError
from domolect.domain.vocabulary import Vocabulary

__all__ = [
    "__version__",
    "CommandParser",
    "DomolectError",
    "Vocabulary",
]
