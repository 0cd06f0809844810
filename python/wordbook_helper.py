#!/usr/bin/env python3
# wordbook - vocabulary words for editors and the terminal
# SPDX-License-Identifier: LGPL-3.0-only
# Copyright (c) 2025 Romariozh

"""
Editor entry point:

    wordbook_helper.py languages
    wordbook_helper.py list [page] [perPage]
    wordbook_helper.py add <lang> <word> [translations_json]
    wordbook_helper.py import <file.json>

Prints one JSON object ({"ok": ..., "data"|"error": ...}) to stdout.
"""

from wordbook.cli.dispatcher import dispatch
from wordbook.transport.editor_stdio import run


def main() -> None:
    run(dispatch)


if __name__ == "__main__":
    main()
