from domolect.adapters.cli.repl import Repl, build_parser, main

__all__ = ["Repl", "build_parser", "main"]
