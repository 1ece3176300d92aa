"""Classic data structures, a calculator and a magic square checker, with interactive console menus."""

__version__ = "0.1.0"