"""
Interactive CLI.

- main.py: entrypoint (logging, bootstrap, menu loop, save on exit)
- bootstrap.py: composition root building AppState
- menus.py: numbered menus and their handlers
- console.py: stdin/stdout Console implementation
"""
