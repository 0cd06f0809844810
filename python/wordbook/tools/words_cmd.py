# SPDX-License-Identifier: LGPL-3.0-only

from __future__ import annotations

import argparse
import json
from typing import Optional

from wordbook.cli.dispatcher import fill_form
from wordbook.services.container import ClientServices, build_client_services
from wordbook.utils.config import Config, load_config
from wordbook.utils.errors import AppError
from wordbook.utils.logging import setup_logging


def _print_json(obj) -> None:
    print(json.dumps(obj, ensure_ascii=False, indent=2))


def _services(args: argparse.Namespace) -> ClientServices:
    return build_client_services(args.cfg)


def _print_notification(form) -> int:
    note = form.notification
    if note.open:
        print(f"[{note.severity}] {note.message}")
    return 0 if note.open and note.severity == "success" else 1


def cmd_languages(args: argparse.Namespace) -> int:
    _print_json(_services(args).client.get_languages())
    return 0


def cmd_list(args: argparse.Namespace) -> int:
    per_page = args.per_page or args.cfg.default_per_page
    _print_json(_services(args).words.page(page=args.page, per_page=per_page))
    return 0


def cmd_add(args: argparse.Namespace) -> int:
    form = _services(args).new_form()
    translations = [{"language_code": code, "translation": text} for code, text in args.tr]
    fill_form(form, args.lang, args.word, translations)
    if not form.can_submit:
        print("word and language are required")
        return 2
    form.submit()
    return _print_notification(form)


def cmd_import(args: argparse.Namespace) -> int:
    form = _services(args).new_form()
    form.import_file(args.file)
    return _print_notification(form)


def cmd_serve(args: argparse.Namespace) -> int:
    import uvicorn

    from wordbook.api.app import create_app

    cfg: Config = args.cfg
    uvicorn.run(create_app(cfg), host=args.host or cfg.http_host, port=args.port or cfg.http_port)
    return 0


def _translation_arg(value: str) -> tuple[str, str]:
    code, sep, text = value.partition(":")
    if not sep or not code.strip() or not text.strip():
        raise argparse.ArgumentTypeError("expected LANG:TEXT, e.g. de:Haus")
    return code.strip(), text.strip()


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="wordbook")
    sub = p.add_subparsers(dest="cmd", required=True)

    p_lang = sub.add_parser("languages", help="List languages known to the words API")
    p_lang.set_defaults(fn=cmd_languages)

    p_list = sub.add_parser("list", help="Show one page of words")
    p_list.add_argument("--page", type=int, default=1)
    p_list.add_argument("--per-page", type=int, default=None)
    p_list.set_defaults(fn=cmd_list)

    p_add = sub.add_parser("add", help="Create a word with optional translations")
    p_add.add_argument("word")
    p_add.add_argument("--lang", default="", help="Word language code (defaults to WORDBOOK_TARGET_LANGUAGE)")
    p_add.add_argument("--tr", action="append", type=_translation_arg, default=[], metavar="LANG:TEXT")
    p_add.set_defaults(fn=cmd_add)

    p_imp = sub.add_parser("import", help="Import words from a JSON file")
    p_imp.add_argument("file")
    p_imp.set_defaults(fn=cmd_import)

    p_srv = sub.add_parser("serve", help="Run the words API")
    p_srv.add_argument("--host", default=None)
    p_srv.add_argument("--port", type=int, default=None)
    p_srv.set_defaults(fn=cmd_serve)

    return p


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    args.cfg = load_config()
    setup_logging(args.cfg.log_path, args.cfg.log_level, stderr=args.cmd == "serve")
    try:
        return args.fn(args)
    except AppError as e:
        print(f"error: {e.message}")
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
