"""Read-eval-print loop for Domolect commands.

Reads one line at a time, prints exactly one line back: the simulated
execution or ``Error: <reason>``. Stops on the exit command or EOF.
"""

import sys
from typing import Optional, TextIO

from domolect.adapters.storage.json_vocabulary import JsonVocabulary, VocabularyFileError
from domolect.config import AppConfig
from domolect.domain.command_parser import CommandParser
from domolect.domain.vocabulary import Vocabulary


def _log(msg: str):
    print(msg, file=sys.stderr)


def build_parser(config: AppConfig) -> CommandParser:
    """Create a parser with the configured vocabulary (built-in unless a file is set)."""
    if not config.vocabulary_file:
        return CommandParser(Vocabulary.default())
    vocabulary = JsonVocabulary(config.vocabulary_file).load()
    _log(f"[vocabulary] loaded {vocabulary!r} from {config.vocabulary_file}")
    return CommandParser(vocabulary)


class Repl:
    """Line-oriented front end around a CommandParser."""

    def __init__(
        self,
        parser: Optional[CommandParser] = None,
        config: Optional[AppConfig] = None,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
    ):
        self._config = config or AppConfig()
        self._parser = parser or CommandParser()
        self._stdin = stdin or sys.stdin
        self._stdout = stdout or sys.stdout

    def is_exit(self, line: str) -> bool:
        return line.lower() == self._config.exit_command.lower()

    def handle(self, line: str) -> str:
        """Parse one line and return the text to print for it."""
        result = self._parser.evaluate(line)
        if self._config.debug:
            _log(f"[repl] {line!r} -> {result}")
        return result

    def run(self) -> int:
        """Run until exit or EOF. Returns the number of lines handled."""
        print(self._config.banner, file=self._stdout)
        handled = 0
        while True:
            self._stdout.write(self._config.prompt)
            self._stdout.flush()
            line = self._stdin.readline()
            if not line:
                # EOF
                self._stdout.write("\n")
                break
            line = line.rstrip("\r\n")
            if self.is_exit(line):
                break
            print(self.handle(line), file=self._stdout)
            handled += 1
        return handled


def main() -> int:
    config = AppConfig.from_env()
    try:
        parser = build_parser(config)
    except VocabularyFileError as e:
        _log(f"[vocabulary] {e}")
        return 1
    try:
        Repl(parser=parser, config=config).run()
    except KeyboardInterrupt:
        _log("\n[repl] interrupted")
    return 0
